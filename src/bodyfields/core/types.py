# topmark:header:start
#
#   project      : BodyFields
#   file         : types.py
#   file_relpath : src/bodyfields/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types exchanged between the composer, the API layer and document stores."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Document:
    """Current state of a remote document (an issue).

    Attributes:
        title (str): Document title.
        body (str): Document body; stores normalize a missing body to ``""``.
    """

    title: str
    body: str


@dataclass(frozen=True)
class Update:
    """Partial update to persist; ``None`` members are left unchanged.

    Attributes:
        title (str | None): New title, if it changes.
        body (str | None): New body, if it changes.
    """

    title: str | None = None
    body: str | None = None

    def as_payload(self) -> dict[str, str]:
        """Return the members that are set, keyed by name."""
        payload: dict[str, str] = {}
        if self.title is not None:
            payload["title"] = self.title
        if self.body is not None:
            payload["body"] = self.body
        return payload

    def apply_to(self, document: Document) -> Document:
        """Return ``document`` with this update applied."""
        return Document(
            title=self.title if self.title is not None else document.title,
            body=self.body if self.body is not None else document.body,
        )


class Outcome(str, Enum):
    """What a composition decided to do with the document.

    CREATED: a new block was inserted.
    UPDATED: an existing block was rewritten.
    REMOVED: an existing block was removed (explicitly, or because it became empty).
    TITLE: only the title changes.
    UNCHANGED: a block exists and already matches.
    SKIPPED: nothing to do (no block to remove or append to, no input).
    """

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"
    TITLE = "title"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
