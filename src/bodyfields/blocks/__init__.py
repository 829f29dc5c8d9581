# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/blocks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block handling: field codec, block location, assembly, merge and composition.

The modules form a small dependency chain (leaves first):

- `bodyfields.blocks.codec`: ``key: value`` line encoding and header/footer text.
- `bodyfields.blocks.markers`: marker pairs per block name and block assembly.
- `bodyfields.blocks.locator`: greedy location of a named block.
- `bodyfields.blocks.merge`: minimal-change merge of new fields.
- `bodyfields.blocks.composer`: the per-run decision producing an `Update`.
"""

from __future__ import annotations

from bodyfields.blocks.codec import (
    FieldSet,
    ParsedBlock,
    parse_field_text,
    parse_fields,
    parse_fields_with_header_footer,
    serialize_fields,
)
from bodyfields.blocks.composer import Composition, compose, insert_block
from bodyfields.blocks.locator import BlockLocation, find_last_end_marker, locate_block
from bodyfields.blocks.markers import BlockMarkers, block_footer, block_header, build_block
from bodyfields.blocks.merge import MergeResult, merge_fields, resolve_title

__all__ = [
    "BlockLocation",
    "BlockMarkers",
    "Composition",
    "FieldSet",
    "MergeResult",
    "ParsedBlock",
    "block_footer",
    "block_header",
    "build_block",
    "compose",
    "find_last_end_marker",
    "insert_block",
    "locate_block",
    "merge_fields",
    "parse_field_text",
    "parse_fields",
    "parse_fields_with_header_footer",
    "resolve_title",
    "serialize_fields",
]
