# topmark:header:start
#
#   project      : BodyFields
#   file         : markers.py
#   file_relpath : src/bodyfields/blocks/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block markers and block assembly.

A block is delimited by a header marker and a footer marker::

    <!-- body fields -->\\r\\n
    ...interior...
    \\r\\n<!-- end body fields -->

Named blocks embed ``: <name>`` in both markers; the ``default`` block name
renders without a suffix. The CRLF halves are part of the markers and are
matched byte-exactly when locating a block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bodyfields.constants import (
    BLOCK_MARKER_CLOSE,
    BLOCK_MARKER_END,
    BLOCK_MARKER_EOL,
    BLOCK_MARKER_START,
    DEFAULT_BLOCK_NAME,
    FIELD_SEPARATOR,
)

# Any block's end marker, whatever its name.
END_MARKER_RE: re.Pattern[str] = re.compile(
    re.escape(BLOCK_MARKER_END) + r"(?:: [^\r\n]*?)?" + re.escape(BLOCK_MARKER_CLOSE)
)


def _name_suffix(block_name: str) -> str:
    if not block_name or block_name == DEFAULT_BLOCK_NAME:
        return ""
    return f"{FIELD_SEPARATOR}{block_name}"


def block_header(block_name: str = DEFAULT_BLOCK_NAME) -> str:
    """Return the header marker (including its trailing CRLF) for ``block_name``."""
    return f"{BLOCK_MARKER_START}{_name_suffix(block_name)}{BLOCK_MARKER_CLOSE}{BLOCK_MARKER_EOL}"


def block_footer(block_name: str = DEFAULT_BLOCK_NAME) -> str:
    """Return the footer marker (including its leading CRLF) for ``block_name``."""
    return f"{BLOCK_MARKER_EOL}{BLOCK_MARKER_END}{_name_suffix(block_name)}{BLOCK_MARKER_CLOSE}"


@dataclass(frozen=True)
class BlockMarkers:
    """Header/footer marker pair of one named block."""

    name: str
    header: str
    footer: str

    @classmethod
    def for_name(cls, block_name: str = DEFAULT_BLOCK_NAME) -> BlockMarkers:
        """Build the marker pair for ``block_name``."""
        return cls(name=block_name, header=block_header(block_name), footer=block_footer(block_name))


def build_block(
    header_marker: str,
    footer_marker: str,
    content: str,
    header_text: str = "",
    footer_text: str = "",
) -> str:
    """Assemble a block from its markers, field content and optional free text.

    Args:
        header_marker (str): Header marker, see `block_header`.
        footer_marker (str): Footer marker, see `block_footer`.
        content (str): Serialized field lines or raw content.
        header_text (str): Free text placed before ``content`` on its own line(s).
        footer_text (str): Free text placed after ``content`` on its own line(s).

    Returns:
        str: The complete block text, markers included.
    """
    head: str = f"{header_text}\n" if header_text else ""
    tail: str = f"\n{footer_text}" if footer_text else ""
    return f"{header_marker}{head}{content}{tail}{footer_marker}"
