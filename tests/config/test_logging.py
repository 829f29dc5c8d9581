# topmark:header:start
#
#   project      : BodyFields
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging: level names, the TRACE level and the package logger."""

from __future__ import annotations

import logging

import pytest

from bodyfields.config.logging import (
    PACKAGE_LOGGER_NAME,
    TRACE_LEVEL,
    BodyfieldsLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from bodyfields.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" DEBUG ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("nonsense", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    assert parse_log_level(value) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")

    assert resolve_env_log_level() == logging.INFO


def test_setup_logging_configures_package_logger() -> None:
    setup_logging(level=logging.ERROR)
    try:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        assert package_logger.level == logging.ERROR
        assert len(package_logger.handlers) == 1
        assert isinstance(get_logger("bodyfields.blocks.composer"), BodyfieldsLogger)
    finally:
        setup_logging(level=TRACE_LEVEL)
