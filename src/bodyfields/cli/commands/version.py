# topmark:header:start
#
#   project      : BodyFields
#   file         : version.py
#   file_relpath : src/bodyfields/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields ``version`` command.

Prints the current BodyFields version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bodyfields.cli.cmd_common import get_console
from bodyfields.constants import BODYFIELDS_VERSION

if TYPE_CHECKING:
    from bodyfields.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of BodyFields.",
)
def version_command() -> None:
    """Show the current version of BodyFields.

    With ``-v`` on the root group a heading is printed before the version.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("BodyFields version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BODYFIELDS_VERSION, bold=True)}")
    else:
        console.print(console.styled(BODYFIELDS_VERSION, bold=True))
