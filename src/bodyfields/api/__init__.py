# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for BodyFields.

This package exposes a small, CLI-free surface for automation:

- `sync_document`: fetch a document from a store, compose the update and
  write it back when (and only when) something changes.
- `compose_text`: apply a configuration to a plain text body (no store).

Both take a frozen `bodyfields.config.Config`; build one with
`bodyfields.config.MutableConfig` and ``freeze()``, which validates option
combinations before anything is fetched.

Examples:
    ```python
    from bodyfields.api import sync_document
    from bodyfields.config import MutableConfig
    from bodyfields.stores import GitHubIssueStore, IssueRef

    config = MutableConfig(fields="status: done", title_from="status").freeze()
    result = sync_document(
        GitHubIssueStore(token), IssueRef.parse("owner/repo", 123), config
    )
    print(result.outcome.value)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bodyfields.blocks.composer import Composition, compose
from bodyfields.config.logging import get_logger
from bodyfields.core.types import Document, Outcome, Update

if TYPE_CHECKING:
    from bodyfields.config import Config
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.stores.base import DocumentStore, IssueRef

logger: BodyfieldsLogger = get_logger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """Result of one `sync_document` run.

    Attributes:
        before (Document): Document as fetched.
        after (Document): Document after applying the update (equal to ``before`` when unchanged).
        composition (Composition): Composer decision.
        written (bool): Whether the store was called to persist the update.
    """

    before: Document
    after: Document
    composition: Composition
    written: bool

    @property
    def outcome(self) -> Outcome:
        """Shortcut to ``composition.outcome``."""
        return self.composition.outcome

    @property
    def update(self) -> Update | None:
        """Shortcut to ``composition.update``."""
        return self.composition.update


def sync_document(
    store: DocumentStore,
    ref: IssueRef,
    config: Config,
    *,
    dry_run: bool = False,
) -> SyncResult:
    """Fetch, compose and (unless nothing changed or ``dry_run``) write a document.

    Args:
        store (DocumentStore): Store to read from and write to.
        ref (IssueRef): Document to update.
        config (Config): Frozen run configuration.
        dry_run (bool): Compose only; never call ``store.write``.

    Returns:
        SyncResult: Before/after documents, the composer decision and whether it was written.

    Raises:
        DocumentNotFoundError: Propagated from the store.
        DocumentWriteError: Propagated from the store.
    """
    before: Document = store.fetch(ref)
    composition: Composition = compose(before, config)
    update: Update | None = composition.update
    logger.info("%s: %s", ref, composition.outcome.value)

    if update is None:
        return SyncResult(before=before, after=before, composition=composition, written=False)

    after: Document = update.apply_to(before)
    if dry_run:
        logger.info("%s: dry run, not writing", ref)
        return SyncResult(before=before, after=after, composition=composition, written=False)

    store.write(ref, update)
    return SyncResult(before=before, after=after, composition=composition, written=True)


def compose_text(body: str, config: Config, *, title: str = "") -> Composition:
    """Compose an update for a plain text ``body`` (no store involved).

    Args:
        body (str): Current document text.
        config (Config): Frozen run configuration.
        title (str): Current title, only relevant when the config sets one.

    Returns:
        Composition: The composer decision.
    """
    return compose(Document(title=title, body=body), config)


__all__ = [
    "SyncResult",
    "compose_text",
    "sync_document",
]
