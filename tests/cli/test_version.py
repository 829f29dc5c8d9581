# topmark:header:start
#
#   project      : BodyFields
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from bodyfields.constants import BODYFIELDS_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == BODYFIELDS_VERSION


def test_version_verbose_prints_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.output.splitlines()[0] == "BodyFields version:"
    assert BODYFIELDS_VERSION in result.output
