"""Line classification for the block level.

Each non-blank source line becomes exactly one block: a level 1 heading,
a level 2 heading, or a paragraph.
"""

from __future__ import annotations

from mdhtml.location import SourceLocation
from mdhtml.nodes import Block, Heading, Paragraph
from mdhtml.parsing.inline import tokenize_inline

# Marker -> heading level. Checked in order; "# " can never match a "## " line.
HEADING_MARKERS: tuple[tuple[str, int], ...] = (
    ("# ", 1),
    ("## ", 2),
)


def classify_line(line: str, location: SourceLocation | None = None) -> Block:
    """Classify one trimmed, non-empty line.

    Heading text is the remainder after the marker, taken literally (no
    inline parsing). Anything else is a paragraph whose children are the
    inline tokens of the whole line.

    Args:
        line: Source line with surrounding whitespace removed
        location: Location of the line's first non-blank character

    Returns:
        Heading or Paragraph node.

    """
    for marker, level in HEADING_MARKERS:
        if line.startswith(marker):
            return Heading(level, line[len(marker) :], location=location)  # type: ignore[arg-type]

    return Paragraph(tuple(tokenize_inline(line, location)), location=location)
