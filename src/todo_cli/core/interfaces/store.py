"""Interfaces for todo stores."""

from __future__ import annotations

from typing import Protocol

from todo_cli.core.domain.todo import Todo


class TodoStoreProtocol(Protocol):
    """Protocol for todo list persistence implementations."""

    async def load(self) -> list[Todo]:
        """Load the full todo list. A missing store yields an empty list."""
        ...

    async def save(self, todos: list[Todo]) -> None:
        """Overwrite the store with the full todo list."""
        ...
