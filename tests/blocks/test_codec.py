# topmark:header:start
#
#   project      : BodyFields
#   file         : test_codec.py
#   file_relpath : tests/blocks/test_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field codec: line splitting, field parsing and serialization."""

from __future__ import annotations

from bodyfields.blocks.codec import (
    parse_field_text,
    parse_fields,
    parse_fields_with_header_footer,
    serialize_fields,
    split_field,
    split_lines,
)
from tests.conftest import parametrize


@parametrize(
    "line, expected",
    [
        ("mr: 1", ("mr", "1")),
        ("url: http://x: y", ("url", "http://x: y")),
        ("empty: ", ("empty", "")),
        (": orphan", ("", "orphan")),
        ("no separator", None),
        ("colon:without-space", None),
    ],
)
def test_split_field_uses_first_separator(line: str, expected: tuple[str, str] | None) -> None:
    """Only the first ``": "`` separates key from value."""
    assert split_field(line) == expected


def test_split_lines_accepts_lf_and_crlf() -> None:
    """Both ``\\n`` and ``\\r\\n`` break lines."""
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]


def test_parse_fields_ignores_free_text_and_keeps_order() -> None:
    """Non-field lines are skipped; later duplicates overwrite in place."""
    fields = parse_fields(["mr: 1", "hello", "cat: 2", "mr: 3"])

    assert fields == {"mr": "3", "cat": "2"}
    assert list(fields) == ["mr", "cat"]


def test_parse_field_text_blank_is_empty() -> None:
    """Blank raw input yields no fields."""
    assert parse_field_text("") == {}
    assert parse_field_text("  \n \n") == {}


def test_parse_field_text_strips_surrounding_whitespace() -> None:
    """Raw input is stripped as a whole before parsing."""
    assert parse_field_text("\n  mr: 1\ncat: 2  \n") == {"mr": "1", "cat": "2"}


def test_header_footer_split() -> None:
    """Text before the first field is header, text after it is footer."""
    parsed = parse_fields_with_header_footer(
        ["Intro", "more intro", "mr: 1", "note", "cat: 2", "Outro"]
    )

    assert parsed.header == "Intro\nmore intro"
    assert parsed.fields == {"mr": "1", "cat": "2"}
    assert parsed.footer == "note\nOutro"


def test_header_footer_without_fields_folds_everything_into_header() -> None:
    """A block without field lines is all header; footer and fields stay empty."""
    parsed = parse_fields_with_header_footer(["just", "text"])

    assert parsed.header == "just\ntext"
    assert parsed.footer == ""
    assert parsed.fields == {}


def test_serialize_fields_joins_with_lf() -> None:
    """Fields serialize as ``key: value`` lines joined by ``\\n``, no trailing newline."""
    assert serialize_fields({"mr": "1", "cat": "2"}) == "mr: 1\ncat: 2"
    assert serialize_fields({}) == ""
