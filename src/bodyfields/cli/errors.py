# topmark:header:start
#
#   project      : BodyFields
#   file         : errors.py
#   file_relpath : src/bodyfields/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BodyFields CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes; `cli_error_from` converts library errors.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from bodyfields.cli.exit_codes import ExitCode
from bodyfields.core.errors import (
    BodyfieldsError,
    ConfigurationError,
    DocumentNotFoundError,
    DocumentStoreError,
)


class BodyfieldsCliError(click.ClickException):
    """Base class for all BodyFields CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class BodyfieldsUsageError(BodyfieldsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BodyfieldsConfigError(BodyfieldsCliError):
    """Error for configuration errors (conflicting or invalid options)."""

    exit_code = ExitCode.CONFIG_ERROR


class BodyfieldsNotFoundError(BodyfieldsCliError):
    """Error when the issue or the input file does not exist."""

    exit_code = ExitCode.DOCUMENT_NOT_FOUND


class BodyfieldsIOError(BodyfieldsCliError):
    """Error for failures reading or writing a document."""

    exit_code = ExitCode.IO_ERROR


class BodyfieldsUnexpectedError(BodyfieldsCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def cli_error_from(exc: BodyfieldsError) -> BodyfieldsCliError:
    """Map a library error onto the CLI error carrying the matching exit code."""
    if isinstance(exc, ConfigurationError):
        return BodyfieldsConfigError(str(exc))
    if isinstance(exc, DocumentNotFoundError):
        return BodyfieldsNotFoundError(str(exc))
    if isinstance(exc, DocumentStoreError):
        return BodyfieldsIOError(str(exc))
    return BodyfieldsUnexpectedError(str(exc))
