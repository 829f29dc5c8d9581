# topmark:header:start
#
#   project      : BodyFields
#   file         : base.py
#   file_relpath : src/bodyfields/stores/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document store protocol and issue references.

A *document store* is the only component that talks to the outside world:
it fetches the current title/body of a document and persists a partial
update. BodyFields performs one fetch and at most one write per run; stores
do not retry and do not coordinate concurrent writers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bodyfields.core.errors import ConfigurationError

if TYPE_CHECKING:
    from bodyfields.core.types import Document, Update


@dataclass(frozen=True)
class IssueRef:
    """Reference to a GitHub issue (or pull request).

    Attributes:
        owner (str): Repository owner (user or organization).
        repo (str): Repository name.
        number (int): Issue number.
    """

    owner: str
    repo: str
    number: int

    @classmethod
    def parse(cls, repository: str, number: str | int) -> IssueRef:
        """Build a reference from ``"owner/repo"`` and an issue number.

        Raises:
            ConfigurationError: If ``repository`` is not ``owner/repo`` or
                ``number`` is not a positive integer.
        """
        owner, sep, repo = repository.strip().partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ConfigurationError(
                f"Invalid repository '{repository}': expected 'owner/repo'."
            )
        try:
            issue_number = int(str(number).strip())
        except ValueError:
            raise ConfigurationError(f"Invalid issue number '{number}'.") from None
        if issue_number <= 0:
            raise ConfigurationError(f"Invalid issue number '{number}'.")
        return cls(owner=owner, repo=repo, number=issue_number)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


@runtime_checkable
class DocumentStore(Protocol):
    """Fetches and partially updates documents identified by an `IssueRef`."""

    def fetch(self, ref: IssueRef) -> Document:
        """Return the current title and body.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            DocumentStoreError: On any other failure.
        """
        ...

    def write(self, ref: IssueRef, update: Update) -> None:
        """Persist ``update``; members set to None are left unchanged.

        Raises:
            DocumentWriteError: If the update could not be persisted.
        """
        ...
