# topmark:header:start
#
#   project      : BodyFields
#   file         : constants.py
#   file_relpath : src/bodyfields/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BODYFIELDS_VERSION: str = get_version("bodyfields")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    BODYFIELDS_VERSION = "0.0.0"

# Block markers. The header marker ends and the footer marker starts with CRLF;
# location is byte-exact, so both halves must stay in sync with what GitHub stores.
BLOCK_MARKER_START: str = "<!-- body fields"
BLOCK_MARKER_END: str = "<!-- end body fields"
BLOCK_MARKER_CLOSE: str = " -->"
BLOCK_MARKER_EOL: str = "\r\n"

DEFAULT_BLOCK_NAME: str = "default"

# Separator between a field key and its value on a single block line.
FIELD_SEPARATOR: str = ": "

# Name of the standalone TOML config file and the pyproject table.
BODYFIELDS_TOML_NAME: str = "bodyfields.toml"
PYPROJECT_TOOL_SECTION: str = "bodyfields"

# Environment variable consulted for the log level when no CLI flag is given.
LOG_LEVEL_ENV_VAR: str = "BODYFIELDS_LOG_LEVEL"

DEFAULT_GITHUB_API_URL: str = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT: float = 30.0

VALUE_NOT_SET: str = "<not set>"
