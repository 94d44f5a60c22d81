# topmark:header:start
#
#   project      : DoctypeGen
#   file         : test_generate.py
#   file_relpath : tests/cli/test_generate.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""CLI tests: `generate` command outcomes and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from doctypegen.cli.exit_codes import ExitCode
from tests.cli.conftest import run_cli_in
from tests.conftest import schema_dict

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def _project(tmp_path: Path, *, modified: str = "2024-01-01 10:00:00") -> Path:
    item_dir = tmp_path / "apps" / "erpnext" / "erpnext" / "stock" / "doctype" / "item"
    item_dir.mkdir(parents=True, exist_ok=True)
    (item_dir / "item.json").write_text(
        json.dumps(
            schema_dict(
                "Item",
                modified,
                [{"fieldname": "item_code", "fieldtype": "Data", "label": "Item Code", "reqd": 1}],
            )
        ),
        encoding="utf-8",
    )
    (tmp_path / "doctypegen.toml").write_text(
        'apps_path = "apps"\noutput = "types/doctypes.ts"\n\n[apps]\nerpnext = ["item"]\n',
        encoding="utf-8",
    )
    return tmp_path / "types" / "doctypes.ts"


def test_generate_writes_output_and_reports(tmp_path: Path) -> None:
    output = _project(tmp_path)

    result = run_cli_in(tmp_path, ["generate"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Updated 1 interface. Output file updated." in result.output
    assert "  item_code: string;\n" in output.read_text(encoding="utf-8")


def test_generate_without_changes_reports_no_changes(tmp_path: Path) -> None:
    _project(tmp_path)
    run_cli_in(tmp_path, ["generate"])

    result = run_cli_in(tmp_path, ["generate"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "No new schema changes." in result.output


def test_check_exits_would_change_and_does_not_write(tmp_path: Path) -> None:
    output = _project(tmp_path)

    result = run_cli_in(tmp_path, ["generate", "--check"])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "1 interface would be updated." in result.output
    assert not output.exists()


def test_check_succeeds_when_up_to_date(tmp_path: Path) -> None:
    _project(tmp_path)
    run_cli_in(tmp_path, ["generate"])

    result = run_cli_in(tmp_path, ["generate", "--check"])

    assert result.exit_code == ExitCode.SUCCESS, result.output


def test_verbose_shows_progress_and_missing(tmp_path: Path) -> None:
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["-v", "generate", "-d", "erpnext:item", "-d", "erpnext:ghost"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Processing: item [updated]" in result.output
    assert "Processing: ghost [not found]" in result.output
    assert "Doctypes without schema: ghost" in result.output


def test_quiet_prints_nothing(tmp_path: Path) -> None:
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["-q", "generate"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


def test_missing_config_is_config_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["generate"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "No apps path configured" in result.output


def test_malformed_doctype_argument_is_config_error(tmp_path: Path) -> None:
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["generate", "-d", "item"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "expected APP:NAME" in result.output


def test_malformed_schema_is_encoding_error(tmp_path: Path) -> None:
    output = _project(tmp_path)
    (tmp_path / "apps" / "erpnext" / "erpnext" / "stock" / "doctype" / "item" / "item.json").write_text(
        "{ broken", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["generate"])

    assert result.exit_code == ExitCode.ENCODING_ERROR
    assert "Cannot parse doctype schema" in result.output
    assert not output.exists()


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-v", "-q", "generate"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_unexpected_failure_exits_unexpected_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    output = _project(tmp_path)

    def _boom(*args: object, **kwargs: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr("doctypegen.cli.commands.generate.generate", _boom)
    result = run_cli_in(tmp_path, ["generate"])

    assert result.exit_code == ExitCode.UNEXPECTED_ERROR
    assert "RuntimeError: boom" in result.output
    assert not output.exists()


def test_verbose_help_mentions_three_levels(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--help"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "up to three times" in result.output
