# topmark:header:start
#
#   project      : BodyFields
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BodyFields against an in-memory store.

`run_cli()` invokes the Click group with ``ctx.obj["store_factory"]`` set,
so commands that would talk to GitHub use a `MemoryDocumentStore` instead.
Tests that touch the working directory (configuration discovery, ``patch``)
should also use the ``isolation`` fixture from ``tests/conftest.py``.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from bodyfields.cli.exit_codes import ExitCode
from bodyfields.cli.main import cli
from bodyfields.core.types import Document
from bodyfields.stores import IssueRef, MemoryDocumentStore

if TYPE_CHECKING:
    from bodyfields.stores.base import DocumentStore

REF = IssueRef("owner", "repo", 42)

# Target options every `update` test passes
TARGET_ARGS: list[str] = ["-r", "owner/repo", "-n", "42", "--token", "t", "--no-config"]


def memory_store(body: str = "", title: str = "title") -> MemoryDocumentStore:
    """Return a store holding a single issue at `REF`."""
    return MemoryDocumentStore(documents={REF: Document(title=title, body=body)})


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    store: DocumentStore | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI, optionally against an injected document store.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        store (DocumentStore | None): Store returned by the store factory; without
            one, commands create a real `GitHubIssueStore`.
        env (dict[str, str | None] | None): Extra environment for the invocation.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["update", *TARGET_ARGS, "-f", "a: 1"], store=memory_store())
        assert_SUCCESS(result)
        ```
    """
    obj: dict[str, Any] = {}
    if store is not None:
        injected: DocumentStore = store

        def _factory(token: str | None, api_url: str) -> DocumentStore:
            return injected

        obj["store_factory"] = _factory
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj=obj, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
