# topmark:header:start
#
#   project      : BodyFields
#   file         : composer.py
#   file_relpath : src/bodyfields/blocks/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compose the updated document for one run.

`compose` is the single decision point between reading a document and
writing it back. It locates the configured block and takes one of four paths:

- **no block**: create one from the supplied fields (or raw content) and
  place it first or after the last existing block; skip when there is nothing
  to create, nothing to remove or nothing to append to;
- **content mode**: replace the block interior with the raw content when it
  differs;
- **remove**: cut the block out of the document;
- **merge**: merge the supplied fields into the existing ones, rebuilding
  the block only when fields or header/footer text changed.

Every path returns a `Composition`. Its ``update`` is None when the caller
must not write anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bodyfields.blocks.codec import (
    FieldSet,
    ParsedBlock,
    parse_field_text,
    parse_fields_with_header_footer,
    serialize_fields,
    split_lines,
)
from bodyfields.blocks.locator import find_last_end_marker, locate_block
from bodyfields.blocks.markers import BlockMarkers, build_block
from bodyfields.blocks.merge import MergeResult, merge_fields, resolve_title
from bodyfields.config.logging import get_logger
from bodyfields.config.model import BlockPosition
from bodyfields.core.types import Outcome, Update

if TYPE_CHECKING:
    from bodyfields.blocks.locator import BlockLocation
    from bodyfields.config import Config
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.core.types import Document

logger: BodyfieldsLogger = get_logger(__name__)

# Separator between a newly placed block and neighbouring document text.
BLOCK_SEPARATOR: str = "\n\n"


@dataclass(frozen=True)
class Composition:
    """Result of composing a document update.

    Attributes:
        update (Update | None): What to persist; None means "do not write".
        outcome (Outcome): What happened to the block (or title).
    """

    update: Update | None
    outcome: Outcome

    @property
    def changed(self) -> bool:
        """Whether the caller has to persist anything."""
        return self.update is not None


def _title_change(document: Document, title: str | None) -> str | None:
    if title is None or title == document.title:
        return None
    return title


def _title_only(document: Document, title: str | None, otherwise: Outcome) -> Composition:
    new_title: str | None = _title_change(document, title)
    if new_title is None:
        return Composition(update=None, outcome=otherwise)
    logger.info("updating title")
    return Composition(update=Update(title=new_title), outcome=Outcome.TITLE)


def insert_block(body: str, block: str, position: BlockPosition) -> str:
    """Place a new ``block`` into ``body``.

    ``FIRST`` puts the block before all text. ``AFTER`` puts it right after the
    last end marker of any block, trimming trailing whitespace before it and
    separating the two by a blank line; without any end marker it behaves
    like ``FIRST``. An empty body becomes the block alone.
    """
    if not body.strip():
        return block
    if position is BlockPosition.AFTER:
        end: int | None = find_last_end_marker(body)
        if end is not None:
            return f"{body[:end].rstrip()}{BLOCK_SEPARATOR}{block}{body[end:]}"
        logger.debug("no existing block to place after, placing first")
    return f"{block}{BLOCK_SEPARATOR}{body}"


def _compose_new_block(document: Document, config: Config) -> Composition:
    if config.remove:
        logger.info("no block to remove")
        return Composition(update=None, outcome=Outcome.SKIPPED)
    if config.append_to_values:
        logger.info("no block to append values")
        return Composition(update=None, outcome=Outcome.SKIPPED)
    if not config.has_fields and not config.has_content:
        logger.info("no fields or content to create a block from")
        return Composition(update=None, outcome=Outcome.SKIPPED)

    new_fields: FieldSet = {}
    if config.content is not None:
        interior: str = config.content
    else:
        new_fields = {
            k: v
            for k, v in parse_field_text(config.fields).items()
            if k not in config.remove_fields
        }
        if not new_fields:
            logger.warning("field input contains no `key: value` line, not creating a block")
            return Composition(update=None, outcome=Outcome.SKIPPED)
        interior = serialize_fields(new_fields)

    markers: BlockMarkers = BlockMarkers.for_name(config.block_name)
    block: str = build_block(
        markers.header,
        markers.footer,
        interior,
        config.header or "",
        config.footer or "",
    )
    logger.info("creating block '%s'", config.block_name)
    title: str | None = resolve_title(
        title=config.title,
        title_from=config.title_from,
        new_fields=new_fields,
        merged_fields=new_fields,
    )
    return Composition(
        update=Update(
            title=_title_change(document, title),
            body=insert_block(document.body, block, config.block_position),
        ),
        outcome=Outcome.CREATED,
    )


def _compose_content(document: Document, config: Config, location: BlockLocation) -> Composition:
    content: str = config.content or ""
    block: str = build_block(
        location.markers.header,
        location.markers.footer,
        content,
        config.header or "",
        config.footer or "",
    )
    if block == location.text:
        logger.info("content unchanged")
        return _title_only(document, config.title, Outcome.UNCHANGED)

    logger.info("updating block content")
    return Composition(
        update=Update(
            title=_title_change(document, config.title),
            body=location.replace(block),
        ),
        outcome=Outcome.UPDATED,
    )


def _compose_removal(document: Document, config: Config, location: BlockLocation) -> Composition:
    logger.info("removing block '%s'", config.block_name)
    return Composition(
        update=Update(
            title=_title_change(document, config.title),
            body=location.replace("").lstrip(),
        ),
        outcome=Outcome.REMOVED,
    )


def _compose_merge(document: Document, config: Config, location: BlockLocation) -> Composition:
    existing: ParsedBlock = parse_fields_with_header_footer(split_lines(location.content))
    result: MergeResult = merge_fields(
        existing.fields,
        config.fields,
        prepend=config.prepend,
        append_to_values=config.append_to_values,
        remove_fields=config.remove_fields,
    )
    title: str | None = resolve_title(
        title=config.title,
        title_from=config.title_from,
        new_fields=result.new_fields,
        merged_fields=result.merged,
    )

    header_text: str = config.header or existing.header
    footer_text: str = config.footer or existing.footer
    decoration_changed: bool = header_text != existing.header or footer_text != existing.footer

    if not result.changed and not decoration_changed:
        logger.info("no changes to block")
        return _title_only(document, title, Outcome.UNCHANGED)

    content: str = result.content
    if content:
        logger.info("updating block '%s'", config.block_name)
        replacement: str = build_block(
            location.markers.header,
            location.markers.footer,
            content,
            header_text,
            footer_text,
        )
        outcome: Outcome = Outcome.UPDATED
    else:
        logger.info("block '%s' has no fields left, removing it", config.block_name)
        replacement = ""
        outcome = Outcome.REMOVED

    return Composition(
        update=Update(
            title=_title_change(document, title),
            body=location.replace(replacement).lstrip(),
        ),
        outcome=outcome,
    )


def compose(document: Document, config: Config) -> Composition:
    """Compute the update that converges ``document`` to ``config``.

    Args:
        document (Document): Current title and body.
        config (Config): Frozen run configuration.

    Returns:
        Composition: The update to persist (or None) and the outcome.
    """
    location: BlockLocation = locate_block(document.body, config.block_name)
    if not location.found:
        return _compose_new_block(document, config)
    if config.has_content:
        return _compose_content(document, config, location)
    if config.remove:
        return _compose_removal(document, config, location)
    return _compose_merge(document, config, location)
