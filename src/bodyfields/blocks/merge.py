# topmark:header:start
#
#   project      : BodyFields
#   file         : merge.py
#   file_relpath : src/bodyfields/blocks/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge newly supplied fields into the fields of an existing block.

The merge is minimal-change:

- an existing key whose value differs is overwritten **in place**;
- a key that does not exist yet is staged and later placed before
  (``prepend``) or after the existing fields;
- in append-to-values mode, only existing keys are touched and ``" <value>"``
  is appended unless the current value already ends with it;
- keys listed for removal are dropped from the existing fields.

`MergeResult.changed` is False when none of the above mutated anything, which
is what makes repeated runs with the same input write nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bodyfields.blocks.codec import FieldSet, parse_field_text, serialize_fields
from bodyfields.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


@dataclass
class MergeResult:
    """Outcome of merging new fields into existing ones.

    Attributes:
        fields (FieldSet): Existing fields after in-place updates and removals.
        added (FieldSet): Brand-new fields, in input order.
        new_fields (FieldSet): The parsed new field input.
        changed (bool): Whether any field was updated, added, appended to or removed.
        prepend (bool): Whether ``added`` goes before ``fields`` in `content`.
    """

    fields: FieldSet = field(default_factory=lambda: {})
    added: FieldSet = field(default_factory=lambda: {})
    new_fields: FieldSet = field(default_factory=lambda: {})
    changed: bool = False
    prepend: bool = False

    @property
    def merged(self) -> FieldSet:
        """All fields in output order."""
        if self.prepend:
            return {**self.added, **self.fields}
        return {**self.fields, **self.added}

    @property
    def content(self) -> str:
        """Serialized field content of the merged block.

        Empty when no field remains; the composer removes the block in that case.
        """
        existing: str = serialize_fields(self.fields)
        if not self.added:
            return existing
        additions: str = serialize_fields(self.added)
        if not existing:
            return additions
        if self.prepend:
            return f"{additions}\n{existing}"
        return f"{existing}\n{additions}"


def merge_fields(
    existing: Mapping[str, str],
    new_field_text: str,
    *,
    prepend: bool = False,
    append_to_values: bool = False,
    remove_fields: Iterable[str] = (),
) -> MergeResult:
    """Merge ``new_field_text`` into ``existing``.

    Args:
        existing (Mapping[str, str]): Fields of the existing block; not mutated.
        new_field_text (str): Raw ``key: value`` lines; may be empty.
        prepend (bool): Place brand-new fields before the existing ones.
        append_to_values (bool): Append values to existing keys instead of replacing them.
        remove_fields (Iterable[str]): Keys to delete from the existing fields. A key that
            is both supplied and listed for removal is removed, never re-added.

    Returns:
        MergeResult: Merged fields, staged additions and the change flag.
    """
    fields: FieldSet = dict(existing)
    added: FieldSet = {}
    new_fields: FieldSet = parse_field_text(new_field_text)
    changed: bool = False
    removals: list[str] = list(remove_fields)

    for key, value in new_fields.items():
        if key in removals:
            continue
        current: str | None = fields.get(key)

        if append_to_values:
            if current is None:
                logger.debug("append: key '%s' not in block, ignored", key)
                continue
            suffix: str = f" {value}"
            if current.endswith(suffix):
                continue
            fields[key] = f"{current}{suffix}"
            changed = True
            continue

        if current is None:
            added[key] = value
            changed = True
        elif current != value:
            fields[key] = value
            changed = True

    for key in removals:
        if key in fields:
            del fields[key]
            logger.debug("removed field '%s'", key)
            changed = True

    logger.trace(
        "merge: %d kept/updated, %d added, changed=%s", len(fields), len(added), changed
    )
    return MergeResult(
        fields=fields,
        added=added,
        new_fields=new_fields,
        changed=changed,
        prepend=prepend,
    )


def resolve_title(
    *,
    title: str | None,
    title_from: str | None,
    new_fields: Mapping[str, str],
    merged_fields: Mapping[str, str],
) -> str | None:
    """Return the title the document should carry, or None to leave it alone.

    With ``title_from``, the value of that key in ``new_fields`` wins; the
    merged fields are the fallback. Otherwise the literal ``title`` is used.
    An empty value never becomes a title.
    """
    if title_from:
        value: str | None = new_fields.get(title_from)
        if value is None:
            value = merged_fields.get(title_from)
        return value or None
    return title or None
