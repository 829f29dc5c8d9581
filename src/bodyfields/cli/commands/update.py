# topmark:header:start
#
#   project      : BodyFields
#   file         : update.py
#   file_relpath : src/bodyfields/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields ``update`` command.

Fetches a GitHub issue, updates its field block and writes the issue back
when something changed. ``--dry-run`` only reports (and with ``--diff``,
shows) what would change.

Examples:
  Set two fields on issue 42:

    $ bodyfields update -r owner/repo -n 42 -f "status: done" -f "owner: @me"

  Preview a removal:

    $ bodyfields update -r owner/repo -n 42 --remove-field owner --dry-run --diff
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from bodyfields.api import sync_document
from bodyfields.cli.cmd_common import (
    build_config,
    cli_errors,
    emit_diff,
    fields_from_options,
    get_console,
    make_store,
    render_outcome,
)
from bodyfields.cli.errors import BodyfieldsUsageError
from bodyfields.cli.exit_codes import ExitCode
from bodyfields.cli.options import (
    CONTEXT_SETTINGS,
    common_block_options,
    common_config_options,
    github_target_options,
)
from bodyfields.config.logging import get_logger
from bodyfields.stores.base import IssueRef

if TYPE_CHECKING:
    from bodyfields.api import SyncResult
    from bodyfields.cli.console import ConsoleLike
    from bodyfields.config import Config
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.stores.base import DocumentStore

logger: BodyfieldsLogger = get_logger(__name__)


@click.command(
    name="update",
    help="Update the field block of a GitHub issue.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Set fields (creates the block when missing)
  bodyfields update -r owner/repo -n 42 -f "status: done"

  # Preview only
  bodyfields update -r owner/repo -n 42 -f "status: done" --dry-run --diff
""",
)
@github_target_options
@common_config_options
@common_block_options
@click.option(
    "--dry-run", "dry_run", is_flag=True, help="Do not write; exit with 2 if the issue would change."
)
@click.option("--diff", is_flag=True, help="Show a unified diff of the body.")
def update_command(
    *,
    repository: str,
    issue_number: int,
    token: str | None,
    api_url: str,
    no_config: bool,
    config_paths: tuple[str, ...],
    field_lines: tuple[str, ...],
    fields_file: IO[str] | None,
    prepend: bool | None,
    append_to_values: bool | None,
    title: str | None,
    title_from: str | None,
    remove_fields: tuple[str, ...],
    header: str | None,
    footer: str | None,
    block_name: str | None,
    block_position: str | None,
    content: str | None,
    remove: bool | None,
    dry_run: bool,
    diff: bool,
) -> None:
    """Update the field block of a GitHub issue.

    Args:
        repository (str): ``owner/repo``.
        issue_number (int): Issue number.
        token (str | None): GitHub token.
        api_url (str): GitHub REST API root.
        no_config (bool): Skip local configuration discovery.
        config_paths (tuple[str, ...]): Extra configuration files.
        field_lines (tuple[str, ...]): ``key: value`` lines from ``--field``.
        fields_file (IO[str] | None): File with ``key: value`` lines.
        prepend (bool | None): Place new fields first.
        append_to_values (bool | None): Append-to-values mode.
        title (str | None): Literal title.
        title_from (str | None): Field key providing the title.
        remove_fields (tuple[str, ...]): Keys to remove.
        header (str | None): Header text.
        footer (str | None): Footer text.
        block_name (str | None): Block name.
        block_position (str | None): Position of a new block.
        content (str | None): Raw block content.
        remove (bool | None): Remove the block.
        dry_run (bool): Compose only.
        diff (bool): Show a unified diff.

    Raises:
        BodyfieldsUsageError: If the repository is malformed.

    Exit Status:
      SUCCESS (0): Nothing to change, or the update was written.
      WOULD_CHANGE (2): ``--dry-run`` found a change.
      DOCUMENT_NOT_FOUND (66): The issue does not exist.
      IO_ERROR (74): Fetching or writing the issue failed.
      CONFIG_ERROR (78): Conflicting options.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    try:
        ref: IssueRef = IssueRef.parse(repository, issue_number)
    except ValueError as e:
        raise BodyfieldsUsageError(str(e)) from e

    config: Config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        fields=fields_from_options(field_lines, fields_file),
        prepend=prepend,
        append_to_values=append_to_values,
        title=title,
        title_from=title_from,
        remove_fields=remove_fields,
        header=header,
        footer=footer,
        block_name=block_name,
        block_position=block_position,
        content=content,
        remove=remove,
    )

    store: DocumentStore = make_store(ctx, token, api_url)
    with cli_errors():
        result: SyncResult = sync_document(store, ref, config, dry_run=dry_run)

    console.print(render_outcome(console, str(ref), result.outcome, dry_run=dry_run))
    if diff:
        emit_diff(
            console,
            result.before,
            result.after,
            label=str(ref),
            color=bool(ctx.obj.get("color_enabled")),
        )

    if dry_run and result.update is not None:
        ctx.exit(ExitCode.WOULD_CHANGE)
