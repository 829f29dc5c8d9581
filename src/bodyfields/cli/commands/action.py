# topmark:header:start
#
#   project      : BodyFields
#   file         : action.py
#   file_relpath : src/bodyfields/cli/commands/action.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields ``action`` command: the GitHub Actions entry point.

Every option is read from the ``INPUT_*`` environment variables the Actions
runner sets for the inputs declared in ``action.yml``; the issue defaults to
``GITHUB_REPOSITORY`` and the token to ``GITHUB_TOKEN`` when the matching
inputs are empty.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import click

from bodyfields.api import sync_document
from bodyfields.cli.cmd_common import build_config, cli_errors, get_console, make_store, render_outcome
from bodyfields.cli.options import CONTEXT_SETTINGS
from bodyfields.config import MutableConfig, action_target_from_env
from bodyfields.config.logging import get_logger

if TYPE_CHECKING:
    from bodyfields.api import SyncResult
    from bodyfields.cli.console import ConsoleLike
    from bodyfields.config import ActionTarget, Config
    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


@click.command(
    name="action",
    help="Run as a GitHub Action (options come from INPUT_* variables).",
    context_settings=CONTEXT_SETTINGS,
)
def action_command() -> None:
    """Update the issue named by the action inputs.

    Exit Status:
      SUCCESS (0): Nothing to change, or the update was written.
      DOCUMENT_NOT_FOUND (66): The issue does not exist.
      IO_ERROR (74): Fetching or writing the issue failed.
      CONFIG_ERROR (78): Missing target or conflicting inputs.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    with cli_errors():
        target: ActionTarget = action_target_from_env(os.environ)
    config: Config = build_config(
        no_config=True,
        config_paths=(),
        base=MutableConfig.from_action_env(os.environ),
    )
    logger.debug("Action config: %s", config)

    store = make_store(ctx, target.token, target.api_url)
    with cli_errors():
        result: SyncResult = sync_document(store, target.ref, config)
    console.print(render_outcome(console, str(target.ref), result.outcome, dry_run=False))
