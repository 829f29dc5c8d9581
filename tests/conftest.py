# topmark:header:start
#
#   project      : BodyFields
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BodyFields test suite.

This file sets up global fixtures and typed helpers shared by the test
modules, and customizes the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `bodyfields.config.MutableConfig` (mutable), then
      `freeze()` into a `bodyfields.config.Config` for composer and API calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from bodyfields.blocks.markers import block_footer, block_header
from bodyfields.config import MutableConfig, logging
from bodyfields.constants import DEFAULT_BLOCK_NAME, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from bodyfields.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_bodyfields_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging for the test suite (TRACE, so decisions show up in failures).

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty temporary working directory.

    Keeps configuration discovery (``bodyfields.toml`` / ``pyproject.toml`` in
    the current directory) from picking up files of the repository.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def fields_to_text(fields: Mapping[str, str]) -> str:
    """Render ``fields`` as raw ``key: value`` input lines."""
    return "\n".join(f"{k}: {v}" for k, v in fields.items())


def fields_to_block(fields: Mapping[str, str], block_name: str = DEFAULT_BLOCK_NAME) -> str:
    """Render ``fields`` as a complete block, markers included."""
    return f"{block_header(block_name)}{fields_to_text(fields)}{block_footer(block_name)}"


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder for scenarios that need staged edits.

    Args:
        **overrides (Any): Keyword overrides to apply to the mutable builder.
            ``fields`` may be given as a mapping.

    Returns:
        MutableConfig: A mutable configuration object ready to be frozen or further edited.
    """
    fields: Any = overrides.pop("fields", None)
    if isinstance(fields, Mapping):
        fields = fields_to_text(cast("Mapping[str, str]", fields))
    m = MutableConfig(fields=fields)
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
