"""mdhtml renderers.

Renderers convert the element tree into output markup.

Available Renderers:
- HtmlRenderer: Renders blocks to an HTML document or fragment

Thread Safety:
Renderers keep per-render output local to each render() call.
Safe for concurrent use from multiple threads.

"""

from mdhtml.renderers.html import HtmlRenderer, html_escape, render, render_fragment

__all__ = ["HtmlRenderer", "html_escape", "render", "render_fragment"]
