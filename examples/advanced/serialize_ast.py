"""Dump the parsed element tree to JSON and restore it."""

from mdhtml import parse
from mdhtml.serialization import from_json, to_json

blocks = parse("# Cached document\n\nThis tree can be **serialized** and *restored*.")

json_str = to_json(blocks, indent=2)
restored = from_json(json_str)

print(json_str)
print("Original == restored:", blocks == restored)
