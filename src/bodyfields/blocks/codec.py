# topmark:header:start
#
#   project      : BodyFields
#   file         : codec.py
#   file_relpath : src/bodyfields/blocks/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented ``key: value`` field encoding.

A block's interior is a list of lines. A line is a *field line* when it
contains the literal separator ``": "``; the text before the first separator
is the key, the text after it is the value. Any other line is free text and
belongs either to the block's *header text* (before the first field line) or
to its *footer text* (after it).

Fields are kept in a plain ``dict`` (``FieldSet``): insertion order is the
output order, overwriting a key keeps its position and the last occurrence of
a duplicated key wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bodyfields.config.logging import get_logger
from bodyfields.constants import FIELD_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)

FieldSet = dict[str, str]

_LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r?\n")


@dataclass
class ParsedBlock:
    """Interior of a block split into header text, fields and footer text.

    Attributes:
        header (str): Free text before the first field line (newline joined).
        footer (str): Free text after the first field line (newline joined).
        fields (FieldSet): Field lines in encounter order.
    """

    header: str = ""
    footer: str = ""
    fields: FieldSet = field(default_factory=lambda: {})


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``\n`` or ``\r\n`` line breaks."""
    return _LINE_BREAK_RE.split(text)


def split_field(line: str) -> tuple[str, str] | None:
    """Split one line into ``(key, value)`` or return None for a non-field line."""
    key, sep, value = line.partition(FIELD_SEPARATOR)
    if not sep:
        return None
    return key, value


def parse_fields(lines: Iterable[str]) -> FieldSet:
    """Parse field lines into an ordered mapping.

    Args:
        lines (Iterable[str]): Candidate lines; non-field lines are ignored.

    Returns:
        FieldSet: Parsed fields in order of first appearance.
    """
    fields: FieldSet = {}
    for line in lines:
        pair: tuple[str, str] | None = split_field(line)
        if pair is None:
            continue
        key, value = pair
        fields[key] = value
    return fields


def parse_field_text(text: str) -> FieldSet:
    """Parse a raw multi-line field input; blank input yields no fields."""
    if not text.strip():
        return {}
    return parse_fields(split_lines(text.strip()))


def parse_fields_with_header_footer(lines: Iterable[str]) -> ParsedBlock:
    """Parse block lines, keeping non-field text before and after the fields.

    Lines before the first field line accumulate into ``header``; once a field
    line was seen, every later non-field line accumulates into ``footer``.

    When no line is a field line, every line is folded into ``header`` and the
    footer stays empty. Existing blocks in the wild rely on this, so it is kept.

    Args:
        lines (Iterable[str]): Interior lines of a block (markers excluded).

    Returns:
        ParsedBlock: Header text, footer text and fields.
    """
    header_lines: list[str] = []
    footer_lines: list[str] = []
    fields: FieldSet = {}
    seen_field: bool = False

    for line in lines:
        pair: tuple[str, str] | None = split_field(line)
        if pair is not None:
            seen_field = True
            key, value = pair
            fields[key] = value
        elif seen_field:
            footer_lines.append(line)
        else:
            header_lines.append(line)

    logger.trace(
        "parsed block: %d header line(s), %d field(s), %d footer line(s)",
        len(header_lines),
        len(fields),
        len(footer_lines),
    )
    return ParsedBlock(
        header="\n".join(header_lines),
        footer="\n".join(footer_lines),
        fields=fields,
    )


def serialize_fields(fields: Mapping[str, str]) -> str:
    """Render fields as ``key: value`` lines joined by ``\\n`` (no trailing newline)."""
    return "\n".join(f"{key}{FIELD_SEPARATOR}{value}" for key, value in fields.items())
