"""Parsing subsystem for mdhtml.

Two leaf-first stages used by ``mdhtml.parser.Parser``:
- ``classify_line``: turns one trimmed line into a Heading or Paragraph
- ``tokenize_inline``: splits paragraph text into Text/Bold/Italic spans

"""

from mdhtml.parsing.blocks import classify_line
from mdhtml.parsing.inline import tokenize_inline, tokenize_italic

__all__ = [
    "classify_line",
    "tokenize_inline",
    "tokenize_italic",
]
