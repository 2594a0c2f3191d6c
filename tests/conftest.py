"""Test configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

from todo_cli.core.domain.todo import Todo


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the real home directory and settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv("TODO_CLI_STORE", raising=False)
    monkeypatch.delenv("TODO_CLI_CONFIG", raising=False)
    yield
    # CLI runs bind structlog to the runner's stderr, which is closed afterwards.
    structlog.reset_defaults()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location for a throwaway store file."""
    return tmp_path / "todos.json"


@pytest.fixture
def sample_todos() -> list[Todo]:
    """A small mixed list of pending and finished todos."""
    return [
        Todo(id=1, description="Buy milk", done=True),
        Todo(id=2, description="Pay bills"),
        Todo(id=4, description="Call mom", done=True),
        Todo(id=7, description="Water plants"),
    ]
