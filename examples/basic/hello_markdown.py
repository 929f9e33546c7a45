"""Parse and render Markdown in a few lines, no config needed."""

from mdhtml import parse, render, render_fragment

blocks = parse("# Hello\n\nSome **bold** and *italic* text")
print(render_fragment(blocks))
print()
print(render(blocks, title="Hello"))
