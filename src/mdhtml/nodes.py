"""Typed element nodes for mdhtml.

The element tree is the only contract between the parser and the renderer.
All nodes are frozen dataclasses with slots:
- Immutability: a parsed tree can be handed to any thread
- Pattern matching: the renderer dispatches with ``match`` on the node class
- Closed union: adding a node kind means touching ``Block``/``Inline`` and
  every ``match`` over them

Node Hierarchy:
Node (base)
├── Block (one per source line)
│   ├── Heading     kind Heading1 / Heading2, leaf
│   └── Paragraph   kind Paragraph, holds inline children
└── Inline (paragraph content)
    ├── Text        kind Text, leaf
    ├── Bold        kind Bold, leaf
    └── Italic      kind Italic, leaf

Leaf nodes carry ``text``; only ``Paragraph`` carries ``children``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal, TypeAlias

from mdhtml.location import SourceLocation


class NodeKind(StrEnum):
    """Discriminator naming the six element kinds."""

    HEADING1 = "Heading1"
    HEADING2 = "Heading2"
    BOLD = "Bold"
    ITALIC = "Italic"
    PARAGRAPH = "Paragraph"
    TEXT = "Text"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all element nodes.

    ``location`` is keyword-only and ignored by ``==`` and ``repr()``:
    two nodes with the same content compare equal wherever they came from.

    """

    location: SourceLocation | None = field(
        default=None, kw_only=True, compare=False, repr=False
    )


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text span inside a paragraph."""

    text: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold span.

    Markdown: **text**
    HTML: <strong>text</strong>

    The content is literal: no italic parsing happens inside bold.

    """

    text: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BOLD


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic span.

    Markdown: *text*
    HTML: <em>text</em>

    """

    text: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ITALIC


# Type alias for inline elements
Inline: TypeAlias = Text | Bold | Italic


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Level 1 or level 2 heading.

    Markdown: # Title / ## Title
    HTML: <h1>Title</h1> / <h2>Title</h2>

    Heading text is literal; emphasis markers are kept as typed.

    """

    level: Literal[1, 2]
    text: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.HEADING1 if self.level == 1 else NodeKind.HEADING2


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: any non-heading line
    HTML: <p>...</p>

    """

    children: tuple[Inline, ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PARAGRAPH


# Type alias for block elements
Block: TypeAlias = Heading | Paragraph

Element: TypeAlias = Block | Inline


__all__ = [
    "Block",
    "Bold",
    "Element",
    "Heading",
    "Inline",
    "Italic",
    "Node",
    "NodeKind",
    "Paragraph",
    "Text",
]
