"""Source location tracking for debugging and diagnostics.

Every element node records where it started in the source text, so tools
built on the tree (the ``--ast`` dump, log messages) can point back at the
original Markdown.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the Markdown source.

    All positions are 1-indexed. ``col_offset`` counts characters of the
    untrimmed source line, so leading indentation is included.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'

            >>> str(SourceLocation(1, 1, "notes.md"))
            'notes.md:1:1'

    """

    lineno: int
    col_offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as ``file:line:col`` or ``line:col``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def shifted(self, columns: int) -> SourceLocation:
        """Return a location on the same line moved right by ``columns``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset + columns,
            source_file=self.source_file,
        )
