# topmark:header:start
#
#   project      : BodyFields
#   file         : options.py
#   file_relpath : src/bodyfields/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the BodyFields Click commands.

This module centralizes reusable options (verbosity, color, block options,
configuration files and GitHub target) and their resolution logic, so
commands and groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from bodyfields.cli.errors import BodyfieldsUsageError
from bodyfields.config.logging import TRACE_LEVEL
from bodyfields.config.model import BlockPosition
from bodyfields.constants import DEFAULT_GITHUB_API_URL

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        BodyfieldsUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BodyfieldsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config/-c`` options.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore bodyfields.toml / pyproject.toml in the current directory.",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_block_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the options that describe the block to write.

    Every option defaults to ``None`` so that unset flags leave values from
    configuration files untouched.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--field",
        "-f",
        "field_lines",
        multiple=True,
        metavar="'KEY: VALUE'",
        help="Field line to set (repeatable).",
    )(f)
    f = click.option(
        "--fields-file",
        "fields_file",
        type=click.File("r", encoding="utf-8"),
        default=None,
        help="Read field lines from a file ('-' for STDIN).",
    )(f)
    f = click.option(
        "--prepend/--no-prepend",
        default=None,
        help="Place newly added fields before the existing ones.",
    )(f)
    f = click.option(
        "--append-to-values/--no-append-to-values",
        "append_to_values",
        default=None,
        help="Append given values to existing fields instead of replacing them.",
    )(f)
    f = click.option("--title", default=None, help="Set the document title.")(f)
    f = click.option(
        "--title-from",
        "title_from",
        default=None,
        metavar="KEY",
        help="Set the document title from the value of this field.",
    )(f)
    f = click.option(
        "--remove-field",
        "remove_fields",
        multiple=True,
        metavar="KEY",
        help="Field key to remove (repeatable).",
    )(f)
    f = click.option("--header", default=None, help="Free text placed before the fields.")(f)
    f = click.option("--footer", default=None, help="Free text placed after the fields.")(f)
    f = click.option(
        "--block-name",
        "block_name",
        default=None,
        help="Name of the block (default: 'default').",
    )(f)
    f = click.option(
        "--block-position",
        "block_position",
        type=click.Choice([p.value for p in BlockPosition]),
        default=None,
        help="Where to insert a new block (default: after the last block).",
    )(f)
    f = click.option(
        "--content",
        default=None,
        help="Replace the whole block interior with this raw text.",
    )(f)
    f = click.option(
        "--remove/--no-remove",
        default=None,
        help="Remove the block.",
    )(f)
    return f


def github_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the options selecting a GitHub issue.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--repository",
        "-r",
        envvar="GITHUB_REPOSITORY",
        required=True,
        metavar="OWNER/REPO",
        help="Repository holding the issue [env: GITHUB_REPOSITORY].",
    )(f)
    f = click.option(
        "--issue-number",
        "-n",
        "issue_number",
        type=click.IntRange(min=1),
        required=True,
        help="Issue (or pull request) number.",
    )(f)
    f = click.option(
        "--token",
        envvar="GITHUB_TOKEN",
        default=None,
        help="GitHub token [env: GITHUB_TOKEN].",
    )(f)
    f = click.option(
        "--api-url",
        "api_url",
        envvar="GITHUB_API_URL",
        default=DEFAULT_GITHUB_API_URL,
        show_default=True,
        help="GitHub REST API root [env: GITHUB_API_URL].",
    )(f)
    return f
