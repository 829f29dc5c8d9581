# topmark:header:start
#
#   project      : BodyFields
#   file         : io.py
#   file_relpath : src/bodyfields/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

This module provides I/O helpers for reading BodyFields configuration from
on-disk TOML files (``bodyfields.toml`` / ``pyproject.toml``) plus small value
getters used when turning a parsed table into a `MutableConfig`.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bodyfields.config.logging import get_logger
from bodyfields.constants import BODYFIELDS_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from bodyfields.config.logging import BodyfieldsLogger

TomlTable = dict[str, Any]

logger: BodyfieldsLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``bodyfields.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the BodyFields table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.bodyfields]``; any other file is
    taken to be a dedicated ``bodyfields.toml`` whose top level is the table.
    """
    if path.name != "pyproject.toml":
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict) or not section:
        logger.error("[tool.%s] section missing or malformed in %s", PYPROJECT_TOOL_SECTION, path)
        return {}
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    ``int``, ``float`` and ``bool`` values are coerced with ``str(...)``. A
    missing key or a non-coercible value yields ``None``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The extracted or coerced string value, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, ``bool(int)`` for integers, or ``None``
            when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings; a single string is split like a multi-line input."""
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return split_list_input(value)
    if isinstance(value, list):
        return [str(item) for item in cast("list[Any]", value)]
    logger.debug("Cannot coerce %r to list, returning []", value)
    return []


def get_fields_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract field input as raw ``key: value`` text.

    Accepts either a (multi-line) string or a table, the latter rendered in
    table order.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        items: dict[str, Any] = cast("dict[str, Any]", value)
        return "\n".join(f"{k}: {v}" for k, v in items.items())
    return get_string_value_or_none(table, key)


def split_list_input(raw: str) -> list[str]:
    """Split a newline- or comma-separated list input; blanks are dropped."""
    items: list[str] = []
    for line in raw.splitlines():
        items.extend(part.strip() for part in line.split(","))
    return [item for item in items if item]


def discover_config_files(directory: Path) -> list[Path]:
    """Return the configuration files found in ``directory``, lowest precedence first.

    ``pyproject.toml`` is only returned when it has a ``[tool.bodyfields]``
    table; a ``bodyfields.toml`` next to it is merged after it and wins.
    """
    found: list[Path] = []
    pyproject: Path = directory / "pyproject.toml"
    if pyproject.is_file():
        tool: Any = load_toml_dict(pyproject).get("tool", {})
        if isinstance(tool, dict) and PYPROJECT_TOOL_SECTION in tool:
            found.append(pyproject)
    local: Path = directory / BODYFIELDS_TOML_NAME
    if local.is_file():
        found.append(local)
    logger.debug("Discovered config files in %s: %s", directory, found)
    return found
