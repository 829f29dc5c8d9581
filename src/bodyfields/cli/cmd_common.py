# topmark:header:start
#
#   project      : BodyFields
#   file         : cmd_common.py
#   file_relpath : src/bodyfields/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
resolving the layered configuration, creating the document store, mapping
library errors onto CLI errors and reporting results.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import click

from bodyfields.cli.errors import cli_error_from
from bodyfields.config import MutableConfig
from bodyfields.config.io import discover_config_files
from bodyfields.config.logging import get_logger
from bodyfields.core.errors import BodyfieldsError
from bodyfields.core.types import Outcome
from bodyfields.stores.github import GitHubIssueStore
from bodyfields.utils.diff import render_patch, unified_body_diff

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import IO

    from bodyfields.cli.console import ConsoleLike
    from bodyfields.config import Config
    from bodyfields.config.logging import BodyfieldsLogger
    from bodyfields.core.types import Document
    from bodyfields.stores.base import DocumentStore

logger: BodyfieldsLogger = get_logger(__name__)

StoreFactory = Callable[..., "DocumentStore"]

_OUTCOME_COLORS: dict[Outcome, str] = {
    Outcome.CREATED: "green",
    Outcome.UPDATED: "yellow",
    Outcome.REMOVED: "red",
    Outcome.TITLE: "yellow",
    Outcome.UNCHANGED: "bright_black",
    Outcome.SKIPPED: "bright_black",
}


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


@contextmanager
def cli_errors() -> Iterator[None]:
    """Re-raise library errors as CLI errors carrying the matching exit code."""
    try:
        yield
    except BodyfieldsError as e:
        logger.debug("Mapping %s to a CLI error", type(e).__name__)
        raise cli_error_from(e) from e


def fields_from_options(field_lines: tuple[str, ...], fields_file: IO[str] | None) -> str | None:
    """Join ``--field`` values and the ``--fields-file`` text into raw field lines.

    Returns:
        str | None: The raw field text, or None when neither option was given.
    """
    parts: list[str] = []
    if fields_file is not None:
        text: str = fields_file.read().strip()
        if text:
            parts.append(text)
    parts.extend(line for line in field_lines if line.strip())
    return "\n".join(parts) if parts else None


def build_config(
    *,
    no_config: bool,
    config_paths: tuple[str, ...] | list[str],
    base: MutableConfig | None = None,
    **overrides: Any,
) -> Config:
    """Resolve the layered configuration and freeze it.

    Resolution order (lowest → highest precedence):
      1. Defaults.
      2. ``pyproject.toml`` (``[tool.bodyfields]``) then ``bodyfields.toml`` in
         the current directory, unless ``no_config`` is set.
      3. Explicit ``--config`` files, merged in order.
      4. ``base`` (e.g. GitHub Actions inputs), if given.
      5. CLI overrides; ``None`` leaves lower layers untouched.

    Args:
        no_config (bool): Skip discovery of local configuration files.
        config_paths (tuple[str, ...] | list[str]): Explicit configuration files.
        base (MutableConfig | None): Extra layer merged before CLI overrides.
        **overrides (Any): `MutableConfig` field overrides.

    Returns:
        Config: The frozen configuration.

    Raises:
        BodyfieldsConfigError: If the resolved options conflict.
    """
    draft = MutableConfig()
    paths: list[Path] = [] if no_config else discover_config_files(Path.cwd())
    paths.extend(Path(p) for p in config_paths)
    for path in paths:
        draft = draft.merge_with(MutableConfig.from_toml_file(path))
    if base is not None:
        draft = draft.merge_with(base)
    draft.apply_overrides(**overrides)
    logger.trace("Draft config after CLI overrides: %s", draft)

    with cli_errors():
        return draft.freeze()


def make_store(ctx: click.Context, token: str | None, api_url: str) -> DocumentStore:
    """Create the document store for a run.

    ``ctx.obj["store_factory"]`` replaces `GitHubIssueStore` when set, which
    lets embedding code and tests run commands against another store.
    """
    ctx.ensure_object(dict)
    factory: StoreFactory = ctx.obj.get("store_factory") or GitHubIssueStore
    return factory(token, api_url=api_url)


def render_outcome(console: ConsoleLike, label: str, outcome: Outcome, *, dry_run: bool) -> str:
    """Return a one-line, styled report of an outcome."""
    text: str = outcome.value
    if dry_run and outcome not in (Outcome.UNCHANGED, Outcome.SKIPPED):
        text = f"would be {outcome.value}" if outcome != Outcome.TITLE else "title would change"
    return f"{label}: {console.styled(text, fg=_OUTCOME_COLORS[outcome])}"


def emit_diff(
    console: ConsoleLike, before: Document, after: Document, *, label: str, color: bool
) -> None:
    """Print the title change and a unified body diff (colorized when ``color`` is set)."""
    if before.title != after.title:
        console.print(console.styled(f"title: {before.title!r} -> {after.title!r}", bold=True))
    diff: str = unified_body_diff(before.body, after.body, label=label)
    if not diff:
        return
    if color:
        console.print(render_patch(diff), nl=False)
    else:
        console.print(diff, nl=False)
