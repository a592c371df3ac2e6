"""Tests for the finance-data CLI."""

import json
from unittest.mock import MagicMock

import pytest

from src.adapters import finance_data_cli
from src.application.use_cases.financial_store import FinancialStore
from src.infrastructure.document_schema import JsonDocumentCodec
from src.infrastructure.key_value_store import InMemoryKeyValueStore


@pytest.fixture
def store(monkeypatch) -> FinancialStore:
    built = FinancialStore(
        InMemoryKeyValueStore(), JsonDocumentCodec(), logger=MagicMock()
    )
    monkeypatch.setattr(finance_data_cli, "build_financial_store", lambda: built)
    monkeypatch.setattr(finance_data_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(finance_data_cli, "get_usage_logger", MagicMock)
    return built


def test_export_prints_document(store, capsys) -> None:
    """export without a path should print the JSON document."""
    assert finance_data_cli.main(["export"]) == 0

    document = json.loads(capsys.readouterr().out)
    assert len(document["debts"]) == 2


def test_export_writes_file(store, tmp_path) -> None:
    """export with a path should write the document there."""
    target = tmp_path / "backup.json"

    assert finance_data_cli.main(["export", str(target)]) == 0

    assert json.loads(target.read_text(encoding="utf-8"))["assets"]


def test_import_with_yes_replaces_data(store, tmp_path, capsys) -> None:
    """import --yes should replace the stored aggregate."""
    source = tmp_path / "data.json"
    source.write_text(
        json.dumps({"expenses": [], "debts": [], "income": [], "assets": []}),
        encoding="utf-8",
    )

    assert finance_data_cli.main(["import", str(source), "--yes"]) == 0

    assert store.state.debts == ()
    assert "Imported 0 expenses" in capsys.readouterr().out


def test_import_can_be_cancelled(store, tmp_path, monkeypatch) -> None:
    """Declining the confirmation should keep the data."""
    source = tmp_path / "data.json"
    source.write_text("{}", encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda _prompt: "n")
    before = store.state

    assert finance_data_cli.main(["import", str(source)]) == 1

    assert store.state is before


def test_invalid_import_returns_error_code(store, tmp_path, capsys) -> None:
    """Invalid documents should be reported on stderr."""
    source = tmp_path / "data.json"
    source.write_text('{"expenses": []}', encoding="utf-8")

    assert finance_data_cli.main(["import", str(source), "--yes"]) == 2

    assert "Invalid file format" in capsys.readouterr().err


def test_unreadable_import_file_returns_error_code(store, tmp_path, capsys) -> None:
    """Missing or non-UTF-8 files are reported without a traceback."""
    before = store.state
    undecodable = tmp_path / "data.json"
    undecodable.write_bytes(b"\xff\xfe\x00{")
    missing = tmp_path / "missing.json"

    assert finance_data_cli.main(["import", str(missing), "--yes"]) == 2
    assert finance_data_cli.main(["import", str(undecodable), "--yes"]) == 2

    err = capsys.readouterr().err
    assert err.count("Could not read") == 2
    assert store.state is before


def test_log_recurring_normalizes_month(store, capsys) -> None:
    """An unpadded month is accepted and reported in canonical form."""
    assert finance_data_cli.main(["log-recurring", "--month", "2025-9"]) == 0

    assert capsys.readouterr().out.strip().endswith("for 2025-09.")


def test_log_recurring_for_month(store, capsys) -> None:
    """log-recurring should report how many expenses were added."""
    assert finance_data_cli.main(["log-recurring", "--month", "2025-12"]) == 0
    assert finance_data_cli.main(["log-recurring", "--month", "2025-12"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Logged 3 recurring expenses for 2025-12.",
        "Logged 0 recurring expenses for 2025-12.",
    ]


def test_invalid_month_is_rejected(store) -> None:
    """argparse should exit on a malformed month."""
    with pytest.raises(SystemExit):
        finance_data_cli.main(["log-recurring", "--month", "december"])
