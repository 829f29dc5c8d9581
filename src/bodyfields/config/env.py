# topmark:header:start
#
#   project      : BodyFields
#   file         : env.py
#   file_relpath : src/bodyfields/config/env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GitHub Actions target resolution.

The action runner passes the issue to update as inputs (``INPUT_REPOSITORY``,
``INPUT_ISSUE-NUMBER``, ``INPUT_GITHUB-TOKEN``); when an input is left empty,
the workflow defaults provided by the runner (``GITHUB_REPOSITORY``,
``GITHUB_TOKEN``, ``GITHUB_API_URL``) are used instead.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bodyfields.config.keys import ActionInput
from bodyfields.config.logging import get_logger
from bodyfields.config.model import action_input_env_name
from bodyfields.constants import DEFAULT_GITHUB_API_URL
from bodyfields.core.errors import ConfigurationError
from bodyfields.stores.base import IssueRef

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


@dataclass(frozen=True)
class ActionTarget:
    """Issue, credentials and API root an action run operates on.

    Attributes:
        ref (IssueRef): Issue to update.
        token (str | None): API token (None for anonymous access).
        api_url (str): REST API root.
    """

    ref: IssueRef
    token: str | None
    api_url: str

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return f"ActionTarget(ref={self.ref!s}, token={token}, api_url={self.api_url!r})"


def action_target_from_env(environ: Mapping[str, str] | None = None) -> ActionTarget:
    """Resolve the action target from ``INPUT_*`` variables and runner defaults.

    Args:
        environ (Mapping[str, str] | None): Environment mapping; defaults to ``os.environ``.

    Returns:
        ActionTarget: The resolved target.

    Raises:
        ConfigurationError: If no repository or issue number is available,
            or if either is malformed.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ

    def first_set(*names: str) -> str | None:
        for name in names:
            value: str | None = env.get(name)
            if value:
                return value
        return None

    repository: str | None = first_set(
        action_input_env_name(ActionInput.REPOSITORY), "GITHUB_REPOSITORY"
    )
    number: str | None = first_set(action_input_env_name(ActionInput.ISSUE_NUMBER))
    if not repository:
        raise ConfigurationError("No repository given (input `repository` or GITHUB_REPOSITORY).")
    if not number:
        raise ConfigurationError("No issue number given (input `issue-number`).")

    target = ActionTarget(
        ref=IssueRef.parse(repository, number),
        token=first_set(action_input_env_name(ActionInput.GITHUB_TOKEN), "GITHUB_TOKEN"),
        api_url=first_set(action_input_env_name(ActionInput.API_URL), "GITHUB_API_URL")
        or DEFAULT_GITHUB_API_URL,
    )
    logger.debug("Action target: %r", target)
    return target
