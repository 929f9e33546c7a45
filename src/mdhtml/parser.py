"""Line-oriented parser producing the element tree.

Architecture:
Leaf-first, in two stages:
- Line classification (``mdhtml.parsing.blocks``): heading or paragraph
- Inline tokenization (``mdhtml.parsing.inline``): bold/italic/text spans

The parser is total: any string, including an empty one, parses to a
(possibly empty) list of blocks, and non-string input parses to ``[]``.

Thread Safety:
- Parser instances are single-use; create one per parse operation
- The resulting tree is immutable and safe to share across threads

"""

from __future__ import annotations

import re

from mdhtml.location import SourceLocation
from mdhtml.nodes import Block
from mdhtml.parsing import classify_line
from mdhtml.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Parser:
    """Parser for the heading/bold/italic Markdown dialect.

    Usage:
        >>> parser = Parser("# Hello\\n\\nSome **bold** text")
        >>> blocks = parser.parse()
        >>> [block.kind for block in blocks]
        [<NodeKind.HEADING1: 'Heading1'>, <NodeKind.PARAGRAPH: 'Paragraph'>]

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path recorded in node locations

        """
        self._source = source
        self._source_file = source_file

    def parse(self) -> list[Block]:
        """Parse the source into blocks, one per non-blank line."""
        if not isinstance(self._source, str):
            logger.debug("Ignoring non-string source of type %s", type(self._source).__name__)
            return []

        blocks: list[Block] = []
        for lineno, line in enumerate(_LINE_BREAK_RE.split(self._source), start=1):
            content = line.strip()
            if not content:
                continue
            indent = len(line) - len(line.lstrip())
            location = SourceLocation(lineno, indent + 1, self._source_file)
            blocks.append(classify_line(content, location))

        logger.debug("Parsed %d blocks", len(blocks))
        return blocks


def parse(source: str, *, source_file: str | None = None) -> list[Block]:
    """Parse Markdown source into an ordered list of blocks.

    Args:
        source: Markdown source text
        source_file: Optional source file path recorded in node locations

    Returns:
        Blocks in source order; ``[]`` for empty, blank or non-string input.

    Example:
        >>> parse("a*b*c")
        [Paragraph(children=(Text(text='a'), Italic(text='b'), Text(text='c')))]

    """
    return Parser(source, source_file=source_file).parse()


__all__ = ["Parser", "parse"]
