# topmark:header:start
#
#   project      : BodyFields
#   file         : console.py
#   file_relpath : src/bodyfields/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
"""Program output of the BodyFields CLI.

Documents, outcomes and diffs are written through a console stored in
``ctx.obj["console"]``; diagnostics go through `logging` instead. The console
decides once, at startup, whether ANSI styling is emitted.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol

import click


class ConsoleLike(Protocol):
    """What CLI commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` keywords (unchanged without color)."""
        ...


class ClickConsole:
    """`ConsoleLike` writing through `click.echo`.

    Streams are looked up on every call so that output follows
    ``sys.stdout``/``sys.stderr`` when they are swapped (as `click.testing`
    does).

    Args:
        enable_color (bool): Emit ANSI styling; when False all output is plain.
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout (no trailing newline when ``nl`` is False)."""
        click.echo(text, nl=nl, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in yellow."""
        self._to_stderr(text, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in bright red."""
        self._to_stderr(text, nl=nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def _to_stderr(self, text: str, *, nl: bool, fg: str) -> None:
        click.echo(self.styled(text, fg=fg), nl=nl, file=sys.stderr, color=self.enable_color)
