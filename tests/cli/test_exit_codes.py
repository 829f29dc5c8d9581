# topmark:header:start
#
#   project      : BodyFields
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: library errors map onto stable exit codes."""

from __future__ import annotations

import pytest

from bodyfields.cli.errors import (
    BodyfieldsConfigError,
    BodyfieldsIOError,
    BodyfieldsNotFoundError,
    BodyfieldsUnexpectedError,
    cli_error_from,
)
from bodyfields.cli.exit_codes import ExitCode
from bodyfields.core.errors import (
    BodyfieldsError,
    ConfigurationError,
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentWriteError,
)
from bodyfields.core.types import Update
from bodyfields.stores import IssueRef, MemoryDocumentStore
from tests.cli.conftest import TARGET_ARGS, memory_store, run_cli


@pytest.mark.parametrize(
    ("error", "expected", "code"),
    [
        (ConfigurationError("x"), BodyfieldsConfigError, ExitCode.CONFIG_ERROR),
        (DocumentNotFoundError("x"), BodyfieldsNotFoundError, ExitCode.DOCUMENT_NOT_FOUND),
        (DocumentWriteError("x"), BodyfieldsIOError, ExitCode.IO_ERROR),
        (DocumentStoreError("x"), BodyfieldsIOError, ExitCode.IO_ERROR),
        (BodyfieldsError("x"), BodyfieldsUnexpectedError, ExitCode.UNEXPECTED_ERROR),
    ],
)
def test_cli_error_from(error: BodyfieldsError, expected: type, code: ExitCode) -> None:
    mapped = cli_error_from(error)

    assert isinstance(mapped, expected)
    assert mapped.exit_code == code
    assert mapped.format_message() == "x"


class FailingWriteStore(MemoryDocumentStore):
    """Memory store whose writes always fail."""

    def write(self, ref: IssueRef, update: Update) -> None:
        raise DocumentWriteError(f"Failed to update {ref}: 403 Forbidden")


def test_write_failure_exits_io_error() -> None:
    store = FailingWriteStore(documents=memory_store("").documents)

    result = run_cli(["--no-color", "update", *TARGET_ARGS, "-f", "a: 1"], store=store)

    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "Error: Failed to update owner/repo#42" in result.output
