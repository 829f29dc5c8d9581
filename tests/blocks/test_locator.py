# topmark:header:start
#
#   project      : BodyFields
#   file         : test_locator.py
#   file_relpath : tests/blocks/test_locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block location: exact markers, greedy span and offset splicing."""

from __future__ import annotations

import pytest

from bodyfields.blocks.locator import find_last_end_marker, locate_block
from tests.conftest import fields_to_block


def test_locate_block_found_with_offsets() -> None:
    """A block is located with its interior and surrounding text."""
    block: str = fields_to_block({"mr": "1"})
    document: str = f"Intro\n\n{block}\n\nOutro"

    location = locate_block(document)

    assert location.found
    assert location.text == block
    assert location.content == "mr: 1"
    assert location.before == "Intro\n\n"
    assert location.after == "\n\nOutro"


def test_locate_block_requires_crlf_markers() -> None:
    """Markers with LF-only line breaks are not recognized."""
    document = "<!-- body fields -->\nmr: 1\n<!-- end body fields -->"

    location = locate_block(document)

    assert not location.found
    assert location.text == ""
    assert location.before == document


def test_locate_block_missing_footer_is_not_found() -> None:
    """A header without a matching footer does not form a block."""
    assert not locate_block("<!-- body fields -->\r\nmr: 1").found


def test_locate_block_is_name_specific() -> None:
    """Default and named blocks do not match each other."""
    document: str = fields_to_block({"a": "1"}, "one")

    assert not locate_block(document).found
    assert locate_block(document, "one").content == "a: 1"


def test_locate_block_spans_first_header_to_last_footer() -> None:
    """Duplicate same-name blocks are located as one greedy span."""
    first: str = fields_to_block({"a": "1"})
    second: str = fields_to_block({"b": "2"})
    document: str = f"{first}\n\nmiddle\n\n{second}"

    location = locate_block(document)

    assert location.text == document


def test_replace_splices_located_span() -> None:
    """Only the located span is replaced; surrounding text is kept verbatim."""
    block: str = fields_to_block({"mr": "1"})
    location = locate_block(f"  Intro\r\n{block}\r\nOutro  ")

    assert location.replace("X") == "  Intro\r\nX\r\nOutro  "


def test_replace_without_block_raises() -> None:
    """Replacing a missing block is a programming error."""
    with pytest.raises(ValueError, match="not found"):
        locate_block("no block").replace("x")


def test_find_last_end_marker() -> None:
    """The offset past the last end marker of any block is returned."""
    a: str = fields_to_block({"a": "1"}, "a")
    b: str = fields_to_block({"b": "2"})
    document: str = f"{a}\n{b}\ntrailing"

    assert find_last_end_marker(document) == len(a) + 1 + len(b)
    assert find_last_end_marker("nothing here") is None
