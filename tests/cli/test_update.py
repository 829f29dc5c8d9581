# topmark:header:start
#
#   project      : BodyFields
#   file         : test_update.py
#   file_relpath : tests/cli/test_update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: ``update`` against an in-memory issue store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bodyfields.cli.exit_codes import ExitCode
from bodyfields.core.types import Update
from tests.cli.conftest import (
    REF,
    TARGET_ARGS,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    memory_store,
    run_cli,
)
from tests.conftest import fields_to_block, mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_update_creates_block() -> None:
    store = memory_store("")

    result = run_cli(
        ["--no-color", "update", *TARGET_ARGS, "-f", "mr: 1", "-f", "cat: 2"], store=store
    )

    assert_SUCCESS(result)
    assert "owner/repo#42: created" in result.output
    assert store.documents[REF].body == fields_to_block({"mr": "1", "cat": "2"})


@mark_cli
def test_update_title_from_field() -> None:
    store = memory_store(fields_to_block({"status": "open"}), title="old")

    result = run_cli(
        ["--no-color", "update", *TARGET_ARGS, "-f", "status: done", "--title-from", "status"],
        store=store,
    )

    assert_SUCCESS(result)
    assert store.documents[REF].title == "done"
    assert store.writes == [(REF, Update(title="done", body=fields_to_block({"status": "done"})))]


@mark_cli
def test_update_unchanged_writes_nothing() -> None:
    store = memory_store(fields_to_block({"mr": "1"}))

    result = run_cli(["--no-color", "update", *TARGET_ARGS, "-f", "mr: 1"], store=store)

    assert_SUCCESS(result)
    assert "unchanged" in result.output
    assert store.writes == []


@mark_cli
def test_update_dry_run_reports_and_exits_would_change() -> None:
    store = memory_store("")

    result = run_cli(
        ["--no-color", "update", *TARGET_ARGS, "-f", "mr: 1", "--dry-run", "--diff"],
        store=store,
    )

    assert_WOULD_CHANGE(result)
    assert "would be created" in result.output
    assert "+<!-- body fields -->" in result.output
    assert store.writes == []


@mark_cli
def test_update_dry_run_without_change_succeeds() -> None:
    store = memory_store(fields_to_block({"mr": "1"}))

    result = run_cli(
        ["--no-color", "update", *TARGET_ARGS, "-f", "mr: 1", "--dry-run"], store=store
    )

    assert_SUCCESS(result)


@mark_cli
def test_update_remove_block() -> None:
    store = memory_store(f"{fields_to_block({'mr': '1'})}\n\nText")

    result = run_cli(["--no-color", "update", *TARGET_ARGS, "--remove"], store=store)

    assert_SUCCESS(result)
    assert store.documents[REF].body == "Text"


@mark_cli
def test_update_fields_file(tmp_path: Path) -> None:
    fields = tmp_path / "fields.txt"
    fields.write_text("a: 1\nb: 2\n", encoding="utf-8")
    store = memory_store("")

    result = run_cli(
        ["update", *TARGET_ARGS, "--fields-file", str(fields), "-f", "c: 3"], store=store
    )

    assert_SUCCESS(result)
    assert store.documents[REF].body == fields_to_block({"a": "1", "b": "2", "c": "3"})


@mark_cli
def test_update_conflicting_options_is_config_error() -> None:
    store = memory_store("")

    result = run_cli(
        ["update", *TARGET_ARGS, "-f", "a: 1", "--title", "T", "--title-from", "a"], store=store
    )

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert store.writes == []


@mark_cli
def test_update_missing_issue_is_not_found() -> None:
    result = run_cli(
        ["update", "-r", "owner/repo", "-n", "7", "--no-config", "-f", "a: 1"],
        store=memory_store(""),
    )

    assert result.exit_code == ExitCode.DOCUMENT_NOT_FOUND, result.output


@mark_cli
def test_update_malformed_repository_is_usage_error() -> None:
    result = run_cli(
        ["update", "-r", "no-slash", "-n", "1", "--no-config", "-f", "a: 1"],
        store=memory_store(""),
    )

    assert_USAGE_ERROR(result)


@mark_cli
def test_update_reads_local_config(isolation: Path) -> None:
    (isolation / "bodyfields.toml").write_text(
        'block_name = "status"\n[fields]\nstate = "open"\n', encoding="utf-8"
    )
    store = memory_store("")

    result = run_cli(
        ["update", "-r", "owner/repo", "-n", "42", "--title-from", "state"], store=store
    )

    assert_SUCCESS(result)
    assert store.documents[REF].body == fields_to_block({"state": "open"}, "status")
    assert store.documents[REF].title == "open"
