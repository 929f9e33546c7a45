"""HTML renderer for the element tree.

Renders blocks to HTML leaf-first: text escaping, then per-node templates,
then (outside fragment mode) the document shell with head, title and the
embedded stylesheet.

Thread Safety:
HtmlRenderer holds only its frozen RenderConfig. render() keeps all
intermediate output local to the call, so a single instance can be shared
across threads.

Total Rendering:
Rendering never raises for tree content. A node the renderer does not know
(or a malformed one, such as a heading of level 3) renders as "".
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

from mdhtml.config import RenderConfig, get_render_config
from mdhtml.nodes import Bold, Heading, Italic, Paragraph, Text
from mdhtml.utils.logger import get_logger

logger = get_logger(__name__)

HTML_LANG = "zh-CN"
INDENT = "    "

DEFAULT_STYLESHEET = """\
    <style>
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f9f9f9;
        }
        h1, h2 {
            color: #2c3e50;
            border-bottom: 2px solid #3498db;
            padding-bottom: 10px;
        }
        h1 {
            font-size: 2.5em;
            margin-bottom: 0.5em;
        }
        h2 {
            font-size: 2em;
            margin-bottom: 0.5em;
        }
        p {
            margin-bottom: 1em;
            text-align: justify;
        }
        strong {
            color: #e74c3c;
            font-weight: bold;
        }
        em {
            color: #8e44ad;
            font-style: italic;
        }
    </style>
"""


def html_escape(s: Any) -> str:
    """Escape HTML special characters.

    Escapes ``&`` first, then ``<``, ``>``, ``"`` and ``'``, so entities
    produced by one substitution are never escaped again.
    ``html.escape()`` writes ``'`` as ``&#x27;``; output here uses ``&#39;``.
    Non-string input escapes to "".
    """
    if not isinstance(s, str):
        return ""
    return html.escape(s, quote=False).replace('"', "&quot;").replace("'", "&#39;")


def indent_lines(content: str, level: int = 1) -> str:
    """Indent every non-blank line of ``content`` by ``level`` steps.

    Blank lines are left untouched. Indentation is cosmetic only.
    """
    prefix = INDENT * level
    return "\n".join(prefix + line if line.strip() else line for line in content.split("\n"))


class HtmlRenderer:
    """Render blocks to an HTML document or fragment.

    Usage:
        >>> from mdhtml.parser import parse
        >>> renderer = HtmlRenderer(RenderConfig(title="Notes"))
        >>> renderer.render_fragment(parse("# Hello **World**"))
        '<h1>Hello **World**</h1>'

    Configuration:
        When no config is passed, the context config
        (``mdhtml.config.get_render_config()``) is read at render time.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render options; None means "use the context config"
        """
        self._config = config

    @property
    def config(self) -> RenderConfig:
        """Effective configuration for the next render."""
        return self._config if self._config is not None else get_render_config()

    def render(self, nodes: Iterable[Any] | None) -> str:
        """Render blocks as a complete HTML document.

        Args:
            nodes: Blocks produced by the parser

        Returns:
            HTML document string, ending with a newline
        """
        config = self.config
        body = indent_lines(self.render_fragment(nodes), 1)

        parts: list[str] = []
        if config.include_doctype:
            parts.append("<!DOCTYPE html>\n")
        parts.append(f'<html lang="{HTML_LANG}">\n')
        parts.append("<head>\n")
        if config.include_metadata:
            parts.append(f'{INDENT}<meta charset="UTF-8">\n')
            parts.append(
                f'{INDENT}<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            )
        parts.append(f"{INDENT}<title>{html_escape(config.title)}</title>\n")
        parts.append(DEFAULT_STYLESHEET)
        parts.append("</head>\n")
        parts.append("<body>\n")
        if body:
            parts.append(body + "\n")
        parts.append("</body>\n")
        parts.append("</html>\n")
        return "".join(parts)

    def render_fragment(self, nodes: Iterable[Any] | None) -> str:
        """Render blocks without the document shell.

        Each block renders on its own line; lines are joined with ``\\n``.
        """
        if nodes is None or isinstance(nodes, (str, bytes)):
            return ""
        return "\n".join(self.render_node(node) for node in nodes)

    # =========================================================================
    # Node rendering
    # =========================================================================

    def render_node(self, node: Any) -> str:
        """Render a single node; unknown nodes render as ""."""
        match node:
            case Heading(level=1):
                return f"<h1>{html_escape(node.text)}</h1>"
            case Heading(level=2):
                return f"<h2>{html_escape(node.text)}</h2>"
            case Paragraph():
                return f"<p>{self._render_inlines(node.children)}</p>"
            case Bold():
                return f"<strong>{html_escape(node.text)}</strong>"
            case Italic():
                return f"<em>{html_escape(node.text)}</em>"
            case Text():
                return html_escape(node.text)
            case _:
                logger.debug("Skipping unrenderable node %r", type(node).__name__)
                return ""

    def _render_inlines(self, children: Any) -> str:
        """Concatenate rendered children with no separator."""
        if not isinstance(children, (tuple, list)):
            return ""
        return "".join(self.render_node(child) for child in children)


def render(
    nodes: Iterable[Any] | None,
    config: RenderConfig | None = None,
    **options: Any,
) -> str:
    """Render blocks to a complete HTML document.

    Args:
        nodes: Blocks produced by ``parse()``
        config: Base configuration (context config if None)
        **options: Option overrides, e.g. ``title="Notes"`` or
            ``include_doctype=False`` (camelCase names are accepted too)

    Returns:
        HTML document string

    Example:
        >>> html = render(parse("# Hello"), title="Greeting")
        >>> "<title>Greeting</title>" in html
        True

    """
    base = config if config is not None else get_render_config()
    if options:
        base = base.merged(options)
    return HtmlRenderer(base).render(nodes)


def render_fragment(nodes: Iterable[Any] | None) -> str:
    """Render blocks to HTML without doctype, head, styles or body wrapper."""
    return HtmlRenderer().render_fragment(nodes)


__all__ = [
    "DEFAULT_STYLESHEET",
    "HtmlRenderer",
    "html_escape",
    "indent_lines",
    "render",
    "render_fragment",
]
