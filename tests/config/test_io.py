# topmark:header:start
#
#   project      : BodyFields
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML configuration sources: loading, value getters and discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bodyfields.config import MutableConfig
from bodyfields.config.io import (
    discover_config_files,
    get_bool_value_or_none,
    get_fields_value_or_none,
    get_list_value,
    get_string_value_or_none,
    load_toml_dict,
    split_list_input,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_invalid_returns_empty(tmp_path: Path) -> None:
    """Malformed TOML and missing files yield an empty table."""
    bad: Path = tmp_path / "bodyfields.toml"
    bad.write_text("title = \n", encoding="utf-8")

    assert load_toml_dict(bad) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_value_getters() -> None:
    """Getters coerce scalars and ignore what they cannot coerce."""
    table = {"s": "x", "n": 3, "b": True, "l": ["a", 1], "t": {"mr": 1, "cat": "two"}, "x": [1]}

    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "n") == "3"
    assert get_string_value_or_none(table, "x") is None
    assert get_string_value_or_none(table, "missing") is None
    assert get_bool_value_or_none(table, "b") is True
    assert get_bool_value_or_none(table, "s") is None
    assert get_list_value(table, "l") == ["a", "1"]
    assert get_list_value(table, "s") == ["x"]
    assert get_fields_value_or_none(table, "t") == "mr: 1\ncat: two"
    assert get_fields_value_or_none(table, "s") == "x"


def test_split_list_input() -> None:
    """Newlines and commas both separate items; blanks are dropped."""
    assert split_list_input("a, b\n\nc,") == ["a", "b", "c"]


def test_from_toml_file_bodyfields_toml(tmp_path: Path) -> None:
    """A dedicated ``bodyfields.toml`` is read from its top level."""
    path: Path = tmp_path / "bodyfields.toml"
    path.write_text(
        'block_name = "status"\n'
        'remove_fields = ["old"]\n'
        "prepend = true\n"
        "[fields]\n"
        'state = "open"\n'
        'owner = "@me"\n',
        encoding="utf-8",
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft.block_name == "status"
    assert draft.remove_fields == ["old"]
    assert draft.prepend is True
    assert draft.fields == "state: open\nowner: @me"
    assert draft.config_files == [str(path)]


def test_from_toml_file_pyproject_tool_table(tmp_path: Path) -> None:
    """``pyproject.toml`` is read from ``[tool.bodyfields]``."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.bodyfields]\ntitle_from = "state"\n',
        encoding="utf-8",
    )

    assert MutableConfig.from_toml_file(path).title_from == "state"


def test_discover_config_files_order(tmp_path: Path) -> None:
    """``pyproject.toml`` (with a tool table) comes before ``bodyfields.toml``."""
    (tmp_path / "pyproject.toml").write_text("[tool.bodyfields]\nprepend = true\n", "utf-8")
    (tmp_path / "bodyfields.toml").write_text("prepend = false\n", "utf-8")

    found = discover_config_files(tmp_path)

    assert [p.name for p in found] == ["pyproject.toml", "bodyfields.toml"]


def test_discover_config_files_ignores_foreign_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.bodyfields]`` is not a config source."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', "utf-8")

    assert discover_config_files(tmp_path) == []
