# topmark:header:start
#
#   project      : BodyFields
#   file         : memory.py
#   file_relpath : src/bodyfields/stores/memory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-process document store.

Keeps documents in a dict and records every write. Used by library callers
that want to run `bodyfields.api.sync_document` without network access, and
throughout the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bodyfields.config.logging import get_logger
from bodyfields.core.errors import DocumentNotFoundError

if TYPE_CHECKING:
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.core.types import Document, Update
    from bodyfields.stores.base import IssueRef

logger: BodyfieldsLogger = get_logger(__name__)


@dataclass
class MemoryDocumentStore:
    """Dict-backed `DocumentStore`.

    Attributes:
        documents (dict[IssueRef, Document]): Current documents.
        writes (list[tuple[IssueRef, Update]]): Every update written, in order.
    """

    documents: dict[IssueRef, Document] = field(default_factory=lambda: {})
    writes: list[tuple[IssueRef, Update]] = field(default_factory=lambda: [])

    def fetch(self, ref: IssueRef) -> Document:
        """Return the stored document for ``ref``.

        Raises:
            DocumentNotFoundError: If no document is stored under ``ref``.
        """
        try:
            return self.documents[ref]
        except KeyError:
            raise DocumentNotFoundError(f"Document {ref} not found.") from None

    def write(self, ref: IssueRef, update: Update) -> None:
        """Apply ``update`` to the stored document and record it.

        Raises:
            DocumentNotFoundError: If no document is stored under ``ref``.
        """
        current: Document = self.fetch(ref)
        self.documents[ref] = update.apply_to(current)
        self.writes.append((ref, update))
        logger.debug("memory store: wrote %s to %s", sorted(update.as_payload()), ref)
