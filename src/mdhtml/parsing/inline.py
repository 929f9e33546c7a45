"""Inline tokenization for paragraph lines.

Splits one line of paragraph text into Text, Bold and Italic spans.

Algorithm:
Bold binds tighter than italic. The outer pass looks for the first complete
``**...**`` pair; the text before it gets an italic-only pass, the pair
becomes one Bold leaf, and scanning resumes after the closing marker. When
no complete bold pair is left, the rest of the line gets the italic-only
pass. Nesting goes one level deep: bold content is never scanned for
italics.

A marker only counts once its closing marker has been found, so an unmatched
``**`` or ``*`` stays in the surrounding Text. Emphasis content must be
non-empty. A ``*`` followed directly by another ``*`` cannot open an italic
span, so ``a**b`` stays literal while ``a*b**c`` still yields Italic("b").

Thread Safety:
Module-level functions with no shared mutable state.

"""

from __future__ import annotations

import re

from mdhtml.location import SourceLocation
from mdhtml.nodes import Bold, Inline, Italic, Text

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")


def tokenize_inline(
    text: str,
    location: SourceLocation | None = None,
) -> list[Inline]:
    """Tokenize one line into inline nodes, in source order.

    Args:
        text: Paragraph line content (already trimmed)
        location: Location of the first character of ``text``; inline nodes
            get locations relative to it

    Returns:
        Inline nodes. Never contains an empty Text leaf.

    Example:
        >>> tokenize_inline("a**b**c")
        [Text(text='a'), Bold(text='b'), Text(text='c')]
        >>> tokenize_inline("a**b")
        [Text(text='a**b')]

    """
    nodes: list[Inline] = []
    pos = 0
    while pos < len(text):
        match = _BOLD_RE.search(text, pos)
        if match is None:
            break
        nodes.extend(tokenize_italic(text[pos : match.start()], _at(location, pos)))
        nodes.append(Bold(match.group(1), location=_at(location, match.start())))
        pos = match.end()

    nodes.extend(tokenize_italic(text[pos:], _at(location, pos)))
    return nodes


def tokenize_italic(
    text: str,
    location: SourceLocation | None = None,
) -> list[Inline]:
    """Italic-only pass: split ``text`` into Text and Italic nodes.

    Bold markers are not recognized here; ``**`` is literal.

    Example:
        >>> tokenize_italic("a*b*c")
        [Text(text='a'), Italic(text='b'), Text(text='c')]

    """
    nodes: list[Inline] = []
    pos = 0
    for match in _ITALIC_RE.finditer(text):
        if match.start() > pos:
            nodes.append(Text(text[pos : match.start()], location=_at(location, pos)))
        nodes.append(Italic(match.group(1), location=_at(location, match.start())))
        pos = match.end()

    if pos < len(text):
        nodes.append(Text(text[pos:], location=_at(location, pos)))
    return nodes


def _at(location: SourceLocation | None, columns: int) -> SourceLocation | None:
    if location is None:
        return None
    return location.shifted(columns)
