"""
mdhtml: small Markdown to HTML converter

Converts a restricted Markdown dialect (``#``/``##`` headings, ``**bold**``,
``*italic*`` and plain paragraphs) into an escaped HTML document.

Quick Start:
    >>> from mdhtml import parse, render, render_fragment
    >>> blocks = parse("# Hello\\n\\nSome **bold** and *italic* text")
    >>> print(render_fragment(blocks))
    <h1>Hello</h1>
    <p>Some <strong>bold</strong> and <em>italic</em> text</p>

    >>> html = render(blocks, title="Greeting")   # full document

    >>> # Or convert in one call
    >>> from mdhtml import Markdown
    >>> md = Markdown(title="Greeting")
    >>> html = md("# Hello")

Files:
    >>> from mdhtml import convert_file
    >>> convert_file("notes.md")   # writes notes.html
"""

from mdhtml.config import (
    DEFAULT_TITLE,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mdhtml.converter import MarkdownConverter, convert_file, convert_text
from mdhtml.errors import (
    ConversionError,
    FileAccessError,
    InputValidationError,
    MdHtmlError,
)
from mdhtml.location import SourceLocation
from mdhtml.nodes import (
    Block,
    Bold,
    Element,
    Heading,
    Inline,
    Italic,
    Node,
    NodeKind,
    Paragraph,
    Text,
)
from mdhtml.parser import Parser, parse
from mdhtml.renderers.html import HtmlRenderer, html_escape, render, render_fragment
from mdhtml.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


class Markdown:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markdown(title="Notes", include_metadata=False)
        >>> html = md("# Hello **World**")
        >>> md.fragment("*hi*")
        '<p><em>hi</em></p>'

    Thread Safety:
        Holds only a frozen RenderConfig. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None, **options: object) -> None:
        """Initialize processor.

        Args:
            config: Base render configuration (defaults if None)
            **options: Option overrides applied on top of ``config``
        """
        base = config or RenderConfig()
        self._config = base.merged(options) if options else base

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render a full HTML document in one call."""
        return HtmlRenderer(self._config).render(parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> list[Block]:
        return parse(source, source_file=source_file)

    def render(self, blocks: list[Block]) -> str:
        return HtmlRenderer(self._config).render(blocks)

    def fragment(self, source: str) -> str:
        """Parse and render without the document shell."""
        return HtmlRenderer(self._config).render_fragment(parse(source))


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_fragment",
    "html_escape",
    "Parser",
    "HtmlRenderer",
    "Markdown",
    # Nodes
    "Node",
    "NodeKind",
    "Block",
    "Inline",
    "Element",
    "Heading",
    "Paragraph",
    "Text",
    "Bold",
    "Italic",
    "SourceLocation",
    # Configuration (ContextVar-based)
    "DEFAULT_TITLE",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Conversion
    "MarkdownConverter",
    "convert_file",
    "convert_text",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "MdHtmlError",
    "InputValidationError",
    "FileAccessError",
    "ConversionError",
]
