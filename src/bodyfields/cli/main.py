# topmark:header:start
#
#   project      : BodyFields
#   file         : main.py
#   file_relpath : src/bodyfields/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Root Click group of the BodyFields CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bodyfields.cli.commands.action import action_command
from bodyfields.cli.commands.patch import patch_command
from bodyfields.cli.commands.show import show_command
from bodyfields.cli.commands.update import update_command
from bodyfields.cli.commands.version import version_command
from bodyfields.cli.console import ClickConsole
from bodyfields.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from bodyfields.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from bodyfields.cli.console import ConsoleLike
    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # -v/-q drive both program-output verbosity and the log level;
    # BODYFIELDS_LOG_LEVEL overrides the latter.
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BodyFields: maintain key/value blocks in GitHub issue bodies.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the BodyFields CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'bodyfields update -r OWNER/REPO -n NUMBER -f \"key: value\"'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(update_command)

cli.add_command(patch_command)

cli.add_command(show_command)

cli.add_command(action_command)

if __name__ == "__main__":
    cli()
