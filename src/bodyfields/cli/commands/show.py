# topmark:header:start
#
#   project      : BodyFields
#   file         : show.py
#   file_relpath : src/bodyfields/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields ``show`` command.

Prints the header text, fields and footer text of one block, read either
from a GitHub issue or from a local file.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from bodyfields.blocks.codec import parse_fields_with_header_footer, split_lines
from bodyfields.blocks.locator import locate_block
from bodyfields.cli.cmd_common import cli_errors, get_console, make_store
from bodyfields.cli.commands.patch import read_document_text
from bodyfields.cli.errors import BodyfieldsUsageError
from bodyfields.cli.exit_codes import ExitCode
from bodyfields.cli.options import CONTEXT_SETTINGS
from bodyfields.constants import DEFAULT_BLOCK_NAME, DEFAULT_GITHUB_API_URL, FIELD_SEPARATOR
from bodyfields.stores.base import IssueRef

if TYPE_CHECKING:
    from bodyfields.blocks.codec import ParsedBlock
    from bodyfields.blocks.locator import BlockLocation
    from bodyfields.cli.console import ConsoleLike


@click.command(
    name="show",
    help="Print the fields of a block of an issue or a local file.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--file", "file_path", default=None, help="Read a local file ('-' for STDIN).")
@click.option("--repository", "-r", default=None, metavar="OWNER/REPO", help="Repository.")
@click.option("--issue-number", "-n", "issue_number", type=click.IntRange(min=1), default=None)
@click.option("--token", envvar="GITHUB_TOKEN", default=None, help="GitHub token [env: GITHUB_TOKEN].")
@click.option(
    "--api-url",
    "api_url",
    envvar="GITHUB_API_URL",
    default=DEFAULT_GITHUB_API_URL,
    help="GitHub REST API root [env: GITHUB_API_URL].",
)
@click.option("--block-name", "block_name", default=DEFAULT_BLOCK_NAME, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
def show_command(
    *,
    file_path: str | None,
    repository: str | None,
    issue_number: int | None,
    token: str | None,
    api_url: str,
    block_name: str,
    as_json: bool,
) -> None:
    """Print one block of a document.

    Args:
        file_path (str | None): Local file (``-`` for STDIN).
        repository (str | None): ``owner/repo`` of the issue.
        issue_number (int | None): Issue number.
        token (str | None): GitHub token.
        api_url (str): GitHub REST API root.
        block_name (str): Block to show.
        as_json (bool): Emit JSON instead of text.

    Raises:
        BodyfieldsUsageError: If neither or both of a file and an issue are given.

    Exit Status:
      SUCCESS (0): The block was found and printed.
      FAILURE (1): The document has no such block.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    wants_issue: bool = repository is not None or issue_number is not None
    if (file_path is None) == (not wants_issue):
        raise BodyfieldsUsageError("Give either --file or --repository with --issue-number.")

    if file_path is not None:
        body: str = read_document_text(file_path)
    else:
        if repository is None or issue_number is None:
            raise BodyfieldsUsageError("--repository and --issue-number go together.")
        with cli_errors():
            ref: IssueRef = IssueRef.parse(repository, issue_number)
            body = make_store(ctx, token, api_url).fetch(ref).body

    location: BlockLocation = locate_block(body, block_name or DEFAULT_BLOCK_NAME)
    parsed: ParsedBlock | None = (
        parse_fields_with_header_footer(split_lines(location.content)) if location.found else None
    )

    if as_json:
        payload: dict[str, object] = {"block": location.markers.name, "found": location.found}
        if parsed is not None:
            payload.update(header=parsed.header, fields=parsed.fields, footer=parsed.footer)
        console.print(json.dumps(payload, indent=2))
    elif parsed is None:
        console.warn(f"No block named {location.markers.name!r}.")
    else:
        if parsed.header:
            console.print(console.styled(parsed.header, dim=True))
        for key, value in parsed.fields.items():
            console.print(f"{console.styled(key, bold=True)}{FIELD_SEPARATOR}{value}")
        if parsed.footer:
            console.print(console.styled(parsed.footer, dim=True))

    if parsed is None:
        ctx.exit(ExitCode.FAILURE)
