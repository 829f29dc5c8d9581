# topmark:header:start
#
#   project      : BodyFields
#   file         : locator.py
#   file_relpath : src/bodyfields/blocks/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate a named block inside a document.

Location is an explicit scan:

1. find the **first** occurrence of the block's header marker;
2. find the **last** occurrence of its footer marker after that header.

The span between them is the block. A document holding several blocks with
the *same* name is therefore treated as one block spanning all of them; this
matches how existing documents were written and is deliberately not
"corrected" to nearest-pair matching.

Matching is case-sensitive and CRLF-exact. A block with only one of its two
markers is reported as not found.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bodyfields.blocks.markers import END_MARKER_RE, BlockMarkers
from bodyfields.config.logging import get_logger
from bodyfields.constants import DEFAULT_BLOCK_NAME

if TYPE_CHECKING:
    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


@dataclass(frozen=True)
class BlockLocation:
    """Result of locating a block in a document.

    Offsets index into ``document``. When ``found`` is False all offsets are -1.

    Attributes:
        document (str): The searched document.
        markers (BlockMarkers): Marker pair that was searched for.
        found (bool): Whether both markers were found in order.
        start (int): Offset of the first header marker character.
        end (int): Offset just past the footer marker.
        content_start (int): Offset just past the header marker.
        content_end (int): Offset of the footer marker.
    """

    document: str
    markers: BlockMarkers
    found: bool
    start: int = -1
    end: int = -1
    content_start: int = -1
    content_end: int = -1

    @property
    def text(self) -> str:
        """Full block text, markers included (empty when not found)."""
        return self.document[self.start : self.end] if self.found else ""

    @property
    def content(self) -> str:
        """Interior between the markers (empty when not found)."""
        return self.document[self.content_start : self.content_end] if self.found else ""

    @property
    def before(self) -> str:
        """Document text preceding the block (the whole document when not found)."""
        return self.document[: self.start] if self.found else self.document

    @property
    def after(self) -> str:
        """Document text following the block (empty when not found)."""
        return self.document[self.end :] if self.found else ""

    def replace(self, replacement: str) -> str:
        """Return the document with the located span replaced by ``replacement``.

        Raises:
            ValueError: If the block was not found.
        """
        if not self.found:
            raise ValueError(f"Block '{self.markers.name}' was not found; nothing to replace.")
        return f"{self.before}{replacement}{self.after}"


def locate_block(document: str, block_name: str = DEFAULT_BLOCK_NAME) -> BlockLocation:
    """Find the block named ``block_name`` in ``document``.

    Args:
        document (str): Document text to search.
        block_name (str): Block name; ``"default"`` selects the unnamed markers.

    Returns:
        BlockLocation: Location details; ``found`` is False when either marker is missing.
    """
    markers: BlockMarkers = BlockMarkers.for_name(block_name)

    start: int = document.find(markers.header)
    if start < 0:
        logger.debug("block '%s': header marker not found", block_name)
        return BlockLocation(document=document, markers=markers, found=False)

    content_start: int = start + len(markers.header)
    content_end: int = document.rfind(markers.footer, content_start)
    if content_end < 0:
        logger.debug("block '%s': header marker without footer marker", block_name)
        return BlockLocation(document=document, markers=markers, found=False)

    end: int = content_end + len(markers.footer)
    logger.debug("block '%s' located at %d..%d", block_name, start, end)
    return BlockLocation(
        document=document,
        markers=markers,
        found=True,
        start=start,
        end=end,
        content_start=content_start,
        content_end=content_end,
    )


def find_last_end_marker(document: str) -> int | None:
    """Return the offset just past the last end marker of *any* block, or None."""
    last: int | None = None
    for match in END_MARKER_RE.finditer(document):
        last = match.end()
    return last
