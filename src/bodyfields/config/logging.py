# topmark:header:start
#
#   project      : BodyFields
#   file         : logging.py
#   file_relpath : src/bodyfields/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
"""Logging for BodyFields: a TRACE level, a typed logger and colored records.

All BodyFields loggers live below the ``bodyfields`` package logger, which
`setup_logging` configures; the root logger of an embedding application is
left alone. Records go to stderr so that commands printing documents to
stdout (``bodyfields patch``) stay pipeable.

The level is taken from the CLI (``-v``/``-q``) unless ``BODYFIELDS_LOG_LEVEL``
is set (a level name such as ``TRACE`` or a number such as ``10``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from bodyfields.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

PACKAGE_LOGGER_NAME: Final[str] = "bodyfields"


class BodyfieldsLogger(logging.Logger):
    """Logger with a `trace` method for decisions too chatty for DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(BodyfieldsLogger)

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; the first one a record reaches picks its color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        if record.levelno >= logging.CRITICAL:
            return chalk.red_bright.bold(message)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim(message)


def parse_log_level(value: str | None) -> int | None:
    """Return the level named by ``value`` (``"debug"``, ``"TRACE"``, ``"10"``), or None.

    Unknown names yield None rather than an error: a typo in an environment
    variable should not break a run.
    """
    if not value or not value.strip():
        return None
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    if name == "WARN":
        return logging.WARNING
    level: object = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level set through ``BODYFIELDS_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the ``bodyfields`` logger with a single colored stderr handler.

    Args:
        level (int | None): Level to use; None consults the environment and
            falls back to WARNING.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> BodyfieldsLogger:
    """Return the `BodyfieldsLogger` called ``name`` (normally ``__name__``)."""
    return cast("BodyfieldsLogger", logging.getLogger(name))
