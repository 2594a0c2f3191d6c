"""Tests for the todo CLI commands.

Each test points ``--store`` at a temporary file and drives the typer app
through ``CliRunner``.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from todo_cli.api.cli.main import app

runner = CliRunner()


def _invoke(store_path: Path, *args: str):
    return runner.invoke(app, ["--store", str(store_path), *args])


def _stored(store_path: Path) -> list[dict]:
    return json.loads(store_path.read_text(encoding="utf-8"))


class TestAddCommand:
    """Tests for ``todo add``."""

    def test_add_prints_id(self, store_path):
        result = _invoke(store_path, "add", "Buy milk")

        assert result.exit_code == 0
        assert "Added todo #1: Buy milk" in result.output
        assert _stored(store_path)[0]["priority"] == "medium"

    def test_add_with_priority_and_due(self, store_path):
        result = _invoke(store_path, "add", "Pay bills", "--priority", "high", "--due", "2026-11-01")

        assert result.exit_code == 0
        entry = _stored(store_path)[0]
        assert entry["priority"] == "high"
        assert entry["due_date"] == "2026-11-01"
        assert entry["done"] is False

    def test_priority_is_case_insensitive(self, store_path):
        result = _invoke(store_path, "add", "Pay bills", "-p", "LOW")

        assert result.exit_code == 0
        assert _stored(store_path)[0]["priority"] == "low"

    def test_bad_due_date_fails(self, store_path):
        result = _invoke(store_path, "add", "Pay bills", "--due", "31/12/2026")

        assert result.exit_code == 1
        assert "Invalid due date" in result.output
        assert not store_path.exists()

    def test_empty_description_fails(self, store_path):
        result = _invoke(store_path, "add", "  ")

        assert result.exit_code == 1
        assert "must not be empty" in result.output

    def test_unknown_priority_is_a_usage_error(self, store_path):
        result = _invoke(store_path, "add", "Pay bills", "--priority", "urgent")

        assert result.exit_code == 2
        assert not store_path.exists()


class TestListCommand:
    """Tests for ``todo list``."""

    @pytest.fixture(autouse=True)
    def _seed(self, store_path):
        _invoke(store_path, "add", "Buy milk", "--priority", "low")
        _invoke(store_path, "add", "Pay bills", "--priority", "high", "--due", "2026-11-01")
        _invoke(store_path, "done", "1")

    def test_default_shows_pending(self, store_path):
        result = _invoke(store_path, "list")

        assert result.exit_code == 0
        assert "Pay bills" in result.output
        assert "Buy milk" not in result.output

    def test_filter_done(self, store_path):
        result = _invoke(store_path, "list", "--filter", "done")

        assert result.exit_code == 0
        assert "Buy milk" in result.output
        assert "[x]" in result.output
        assert "Pay bills" not in result.output

    def test_filter_all_keeps_order(self, store_path):
        result = _invoke(store_path, "list", "--filter", "all")

        assert result.exit_code == 0
        assert result.output.index("Buy milk") < result.output.index("Pay bills")
        assert "2026-11-01" in result.output
        assert "high" in result.output

    def test_list_does_not_write(self, store_path):
        before = store_path.read_text(encoding="utf-8")
        _invoke(store_path, "list", "--filter", "all")

        assert store_path.read_text(encoding="utf-8") == before

    def test_empty_result(self, tmp_path):
        result = _invoke(tmp_path / "empty.json", "list")

        assert result.exit_code == 0
        assert "No todos found." in result.output


class TestDoneCommand:
    """Tests for ``todo done``."""

    def test_marks_done(self, store_path):
        _invoke(store_path, "add", "Buy milk")
        result = _invoke(store_path, "done", "1")

        assert result.exit_code == 0
        assert "Marked todo #1 as done." in result.output
        assert _stored(store_path)[0]["done"] is True

    def test_done_twice_succeeds(self, store_path):
        _invoke(store_path, "add", "Buy milk")
        _invoke(store_path, "done", "1")
        result = _invoke(store_path, "done", "1")

        assert result.exit_code == 0

    def test_unknown_id_fails_and_keeps_file(self, store_path):
        _invoke(store_path, "add", "Buy milk")
        before = store_path.read_text(encoding="utf-8")

        result = _invoke(store_path, "done", "42")

        assert result.exit_code == 1
        assert "Todo #42 not found." in result.output
        assert store_path.read_text(encoding="utf-8") == before

    def test_non_integer_id_is_a_usage_error(self, store_path):
        result = _invoke(store_path, "done", "abc")

        assert result.exit_code == 2


class TestRemoveCommand:
    """Tests for ``todo remove``."""

    def test_removes(self, store_path):
        _invoke(store_path, "add", "Buy milk")
        _invoke(store_path, "add", "Pay bills")

        result = _invoke(store_path, "remove", "1")

        assert result.exit_code == 0
        assert "Removed todo #1." in result.output
        assert [entry["id"] for entry in _stored(store_path)] == [2]

    def test_unknown_id_fails(self, store_path):
        result = _invoke(store_path, "remove", "5")

        assert result.exit_code == 1
        assert "not found" in result.output


class TestErrors:
    def test_corrupt_store_reports_parse_error(self, store_path):
        store_path.write_text("[{broken", encoding="utf-8")

        result = _invoke(store_path, "list")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not valid JSON" in result.output

    def test_store_path_from_environment(self, store_path, monkeypatch):
        monkeypatch.setenv("TODO_CLI_STORE", str(store_path))

        result = runner.invoke(app, ["add", "Buy milk"])

        assert result.exit_code == 0
        assert _stored(store_path)[0]["description"] == "Buy milk"

    def test_default_store_is_in_home(self):
        result = runner.invoke(app, ["add", "Buy milk"])

        assert result.exit_code == 0
        assert (Path.home() / ".todo-cli.json").exists()
