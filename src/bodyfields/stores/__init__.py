# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/stores/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document stores: where documents are fetched from and written to."""

from __future__ import annotations

from bodyfields.stores.base import DocumentStore, IssueRef
from bodyfields.stores.github import GitHubIssueStore
from bodyfields.stores.memory import MemoryDocumentStore

__all__ = [
    "DocumentStore",
    "GitHubIssueStore",
    "IssueRef",
    "MemoryDocumentStore",
]
