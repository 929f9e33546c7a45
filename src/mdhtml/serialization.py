"""Element tree serialization: JSON round-trip for mdhtml nodes.

Converts element nodes to/from JSON-compatible dicts. Used by the
``mdhtml --ast`` command to dump the parsed tree, and handy for debugging
and inspection.

All output is deterministic (sorted keys).

Example:
    from mdhtml import parse
    from mdhtml.serialization import to_json, from_json

    blocks = parse("# Hello **World**")
    json_str = to_json(blocks)
    assert from_json(json_str) == blocks

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from mdhtml.location import SourceLocation
from mdhtml.nodes import Block, Bold, Heading, Italic, Node, Paragraph, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Heading": Heading,
    "Paragraph": Paragraph,
    "Text": Text,
    "Bold": Bold,
    "Italic": Italic,
}

_BLOCK_TYPES = (Heading, Paragraph)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator and the ``kind`` name for readers
    that only care about the element kind. ``location`` is written only
    when the node has one.

    Args:
        node: Any mdhtml element node.

    Returns:
        Dict with ``_type``, ``kind`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__, "kind": str(node.kind)}

    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "location" and value is None:
            continue
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class; the
    informational ``kind`` key is ignored.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed element node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise ValueError(msg) from e


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if value.get("_type") == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                source_file=value.get("source_file"),
            )
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(blocks: list[Block], *, indent: int | None = None) -> str:
    """Serialize a parsed block list to a JSON array.

    Args:
        blocks: Blocks as returned by ``parse()``.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string. Non-ASCII text is written as-is.

    """
    return json.dumps(
        [to_dict(block) for block in blocks],
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


def from_json(data: str) -> list[Block]:
    """Deserialize a block list from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of blocks.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of blocks, got {type(raw).__name__}"
        raise ValueError(msg)

    blocks: list[Block] = []
    for item in raw:
        node = from_dict(item)
        if not isinstance(node, _BLOCK_TYPES):
            msg = f"Expected a block node, got {type(node).__name__}"
            raise ValueError(msg)
        blocks.append(node)
    return blocks


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
