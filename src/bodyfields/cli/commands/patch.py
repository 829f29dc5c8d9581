# topmark:header:start
#
#   project      : BodyFields
#   file         : patch.py
#   file_relpath : src/bodyfields/cli/commands/patch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields ``patch`` command.

Applies the block options to a local text file (or to STDIN with ``-``)
without talking to GitHub. Useful for previewing a configuration and for
issue templates kept in a repository.

Line breaks are preserved byte for byte: block markers end in ``\\r\\n``
and files are read and written without newline translation.

Examples:
  Print the updated document:

    $ bodyfields patch ISSUE.md -f "status: done"

  Update the file in place:

    $ bodyfields patch ISSUE.md -f "status: done" --apply

  Filter STDIN to STDOUT:

    $ cat ISSUE.md | bodyfields patch - --remove-field status
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING

import click

from bodyfields.api import compose_text
from bodyfields.cli.cmd_common import (
    build_config,
    emit_diff,
    fields_from_options,
    get_console,
    render_outcome,
)
from bodyfields.cli.errors import BodyfieldsIOError, BodyfieldsNotFoundError, BodyfieldsUsageError
from bodyfields.cli.options import CONTEXT_SETTINGS, common_block_options, common_config_options
from bodyfields.config.logging import get_logger
from bodyfields.core.types import Document

if TYPE_CHECKING:
    from bodyfields.blocks.composer import Composition
    from bodyfields.cli.console import ConsoleLike
    from bodyfields.config import Config
    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)

STDIN_PATH = "-"


def read_document_text(path: str) -> str:
    """Read a local document (``-`` for STDIN) without newline translation.

    Raises:
        BodyfieldsNotFoundError: If ``path`` does not exist.
        BodyfieldsIOError: If the file cannot be read or decoded.
    """
    if path == STDIN_PATH:
        data: bytes = click.get_binary_stream("stdin").read()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BodyfieldsIOError(f"STDIN is not valid UTF-8: {e}") from e

    file_path = Path(path)
    if not file_path.exists():
        raise BodyfieldsNotFoundError(f"File not found: {path}")
    try:
        with file_path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BodyfieldsIOError(f"Cannot read {path}: {e}") from e


def write_document_text(path: str, text: str) -> None:
    """Write ``text`` to ``path`` without newline translation.

    Raises:
        BodyfieldsIOError: If the file cannot be written.
    """
    try:
        with Path(path).open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise BodyfieldsIOError(f"Cannot write {path}: {e}") from e


@click.command(
    name="patch",
    help="Apply block options to a local file (or '-' for STDIN).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("path", type=str)
@common_config_options
@common_block_options
@click.option(
    "--current-title",
    "current_title",
    default="",
    help="Title to compare --title/--title-from against (local files have none).",
)
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write the result back to PATH."
)
@click.option("--diff", is_flag=True, help="Show a unified diff instead of the document.")
def patch_command(
    *,
    path: str,
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
    current_title: str,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Apply block options to a local document.

    Without ``--apply`` the resulting document is printed to STDOUT (or, with
    ``--diff``, a unified diff). With ``--apply`` the file is rewritten when
    it changes and a one-line outcome is printed.

    Args:
        path (str): File to patch, or ``-`` for STDIN.
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
        current_title (str): Title of the local document.
        apply_changes (bool): Write the result back to ``path``.
        diff (bool): Show a unified diff.

    Raises:
        BodyfieldsUsageError: If ``--apply`` is combined with STDIN input.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if apply_changes and path == STDIN_PATH:
        raise BodyfieldsUsageError("--apply cannot be used when reading from STDIN ('-').")

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

    body: str = read_document_text(path)
    before = Document(title=current_title, body=body)
    composition: Composition = compose_text(body, config, title=current_title)
    after: Document = composition.update.apply_to(before) if composition.update else before
    label: str = "<stdin>" if path == STDIN_PATH else path

    if diff:
        emit_diff(console, before, after, label=label, color=bool(ctx.obj.get("color_enabled")))
    elif not apply_changes:
        console.print(after.body, nl=False)

    if apply_changes:
        if after.body != before.body:
            write_document_text(path, after.body)
        if after.title != before.title:
            console.warn(f"{label}: title is now {after.title!r} (not stored in files)")
        console.print(render_outcome(console, label, composition.outcome, dry_run=False))
