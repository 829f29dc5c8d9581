# topmark:header:start
#
#   project      : BodyFields
#   file         : github.py
#   file_relpath : src/bodyfields/stores/github.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GitHub issue store (REST API v3 over `requests`).

Endpoints:
    - ``GET   {api_url}/repos/{owner}/{repo}/issues/{number}``
    - ``PATCH {api_url}/repos/{owner}/{repo}/issues/{number}`` with a JSON
      payload holding only the members of the `Update` that are set.

Errors are mapped onto the BodyFields store exceptions and are never retried:
a 404 (or 410, for deleted issues) becomes `DocumentNotFoundError`; any other
failure while writing becomes `DocumentWriteError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import requests

from bodyfields.config.logging import get_logger
from bodyfields.constants import BODYFIELDS_VERSION, DEFAULT_GITHUB_API_URL, DEFAULT_HTTP_TIMEOUT
from bodyfields.core.errors import DocumentNotFoundError, DocumentStoreError, DocumentWriteError
from bodyfields.core.types import Document

if TYPE_CHECKING:
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.core.types import Update
    from bodyfields.stores.base import IssueRef

logger: BodyfieldsLogger = get_logger(__name__)

_NOT_FOUND_STATUSES: frozenset[int] = frozenset({404, 410})


class GitHubIssueStore:
    """`DocumentStore` backed by GitHub issues.

    Args:
        token (str | None): Token sent as ``Authorization: Bearer <token>``;
            anonymous requests only work for reading public repositories.
        api_url (str): REST API root (override for GitHub Enterprise Server).
        timeout (float): Per-request timeout in seconds.
        session (requests.Session | None): Session to use; a new one is created if omitted.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"bodyfields/{BODYFIELDS_VERSION}",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def issue_url(self, ref: IssueRef) -> str:
        """Return the REST URL of the issue referenced by ``ref``."""
        return f"{self.api_url}/repos/{ref.owner}/{ref.repo}/issues/{ref.number}"

    def fetch(self, ref: IssueRef) -> Document:
        """Fetch the issue title and body.

        Raises:
            DocumentNotFoundError: If the issue does not exist (or is not visible).
            DocumentStoreError: On transport errors or unexpected responses.
        """
        url: str = self.issue_url(ref)
        logger.debug("GET %s", url)
        try:
            response: requests.Response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DocumentStoreError(f"Failed to fetch {ref}: {e}") from e

        if response.status_code in _NOT_FOUND_STATUSES:
            raise DocumentNotFoundError(f"Issue {ref} not found.")
        try:
            response.raise_for_status()
            data: Any = response.json()
        except (requests.HTTPError, ValueError) as e:
            raise DocumentStoreError(f"Failed to fetch {ref}: {e}") from e

        if not isinstance(data, dict):
            raise DocumentStoreError(f"Unexpected response for {ref}: {data!r}")
        title: Any = data.get("title")
        body: Any = data.get("body")
        return Document(
            title=title if isinstance(title, str) else "",
            body=body if isinstance(body, str) else "",
        )

    def write(self, ref: IssueRef, update: Update) -> None:
        """Send a partial update of the issue.

        Raises:
            DocumentNotFoundError: If the issue does not exist.
            DocumentWriteError: On transport, authentication or validation errors.
        """
        payload: dict[str, str] = update.as_payload()
        if not payload:
            logger.debug("empty update for %s, not sending", ref)
            return

        url: str = self.issue_url(ref)
        logger.debug("PATCH %s (%s)", url, ", ".join(sorted(payload)))
        try:
            response: requests.Response = self.session.patch(
                url, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise DocumentWriteError(f"Failed to update {ref}: {e}") from e

        if response.status_code in _NOT_FOUND_STATUSES:
            raise DocumentNotFoundError(f"Issue {ref} not found.")
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise DocumentWriteError(f"Failed to update {ref}: {e}") from e
        logger.info("updated %s", ref)
