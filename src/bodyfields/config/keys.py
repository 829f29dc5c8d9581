# topmark:header:start
#
#   project      : BodyFields
#   file         : keys.py
#   file_relpath : src/bodyfields/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names for BodyFields configuration sources.

This module defines the authoritative string constants used when reading
BodyFields configuration from TOML sources (``bodyfields.toml`` and
``[tool.bodyfields]`` in ``pyproject.toml``) and from GitHub Actions inputs.

Notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - TOML keys use underscores; action inputs use dashes (as declared in
      ``action.yml``).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by BodyFields configuration (all top-level in the table)."""

    KEY_FIELDS: Final[str] = "fields"
    KEY_PREPEND: Final[str] = "prepend"
    KEY_APPEND_TO_VALUES: Final[str] = "append_to_values"
    KEY_TITLE: Final[str] = "title"
    KEY_TITLE_FROM: Final[str] = "title_from"
    KEY_REMOVE_FIELDS: Final[str] = "remove_fields"
    KEY_HEADER: Final[str] = "header"
    KEY_FOOTER: Final[str] = "footer"
    KEY_BLOCK_NAME: Final[str] = "block_name"
    KEY_BLOCK_POSITION: Final[str] = "block_position"
    KEY_CONTENT: Final[str] = "content"
    KEY_REMOVE: Final[str] = "remove"


class ActionInput:
    """GitHub Actions input names.

    The runner exposes an input ``name`` as the environment variable
    ``INPUT_<NAME>`` (upper-cased, spaces replaced by underscores, dashes kept).
    """

    FIELDS: Final[str] = "fields"
    PREPEND: Final[str] = "prepend"
    APPEND_TO_VALUES: Final[str] = "append-to-values"
    TITLE: Final[str] = "title"
    TITLE_FROM: Final[str] = "title-from"
    REMOVE_FIELDS: Final[str] = "remove-fields"
    HEADER: Final[str] = "header"
    FOOTER: Final[str] = "footer"
    BLOCK_NAME: Final[str] = "block-name"
    BLOCK_POSITION: Final[str] = "block-position"
    CONTENT: Final[str] = "content"
    REMOVE: Final[str] = "remove"

    GITHUB_TOKEN: Final[str] = "github-token"
    REPOSITORY: Final[str] = "repository"
    ISSUE_NUMBER: Final[str] = "issue-number"
    API_URL: Final[str] = "api-url"
