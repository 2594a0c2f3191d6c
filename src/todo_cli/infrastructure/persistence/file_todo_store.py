"""
File-Based Todo Store

This module provides the JSON file implementation of TodoStoreProtocol.

The whole list is kept in a single file as a JSON array of todo objects,
in insertion order:
- A missing file loads as an empty list
- Saves overwrite the file with the full list
- Atomic writes (temp file, then rename)
"""

from __future__ import annotations

import json
from contextlib import suppress
from pathlib import Path

import aiofiles
import structlog

from todo_cli.core.domain.errors import FileIOError, ParseError
from todo_cli.core.domain.todo import Todo
from todo_cli.core.interfaces.store import TodoStoreProtocol


class FileTodoStore(TodoStoreProtocol):
    """
    File-based todo persistence implementing TodoStoreProtocol.

    Example:
        >>> store = FileTodoStore("~/.todo-cli.json")
        >>> todos = await store.load()
        >>> todos.append(Todo(id=1, description="Buy milk"))
        >>> await store.save(todos)
    """

    def __init__(self, path: str | Path):
        """
        Initialize FileTodoStore.

        Args:
            path: Location of the JSON store file
        """
        self.path = Path(path).expanduser()
        self.logger = structlog.get_logger().bind(component="file_todo_store")

    async def load(self) -> list[Todo]:
        """
        Load the todo list from disk.

        Returns:
            Todos in stored order, or an empty list if the file does not exist

        Raises:
            FileIOError: If the file exists but cannot be read
            ParseError: If the file holds invalid JSON or malformed records
        """
        if not self.path.exists():
            self.logger.debug("todo_store_missing", path=str(self.path))
            return []

        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileIOError(
                f"Failed to read store file {self.path}: {exc}", path=str(self.path)
            ) from exc

        todos = self._parse(content)
        self.logger.debug("todo_store_loaded", path=str(self.path), count=len(todos))
        return todos

    async def save(self, todos: list[Todo]) -> None:
        """
        Overwrite the store file with the full list.

        Uses atomic write pattern (write to temp file, then rename).

        Args:
            todos: Complete todo list to persist

        Raises:
            FileIOError: If the file cannot be written
        """
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        content = json.dumps(
            [todo.to_dict() for todo in todos], indent=2, ensure_ascii=False
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(content + "\n")
            temp_path.replace(self.path)
        except OSError as exc:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise FileIOError(
                f"Failed to write store file {self.path}: {exc}", path=str(self.path)
            ) from exc

        self.logger.debug("todo_store_saved", path=str(self.path), count=len(todos))

    def _parse(self, content: str) -> list[Todo]:
        """Decode the file content into Todo records."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ParseError(
                f"Store file {self.path} is not valid JSON: {exc}", path=str(self.path)
            ) from exc

        if not isinstance(data, list):
            raise ParseError(
                f"Store file {self.path} must contain a JSON array of todos.",
                path=str(self.path),
            )

        todos: list[Todo] = []
        seen: set[int] = set()
        for index, raw in enumerate(data):
            try:
                todo = Todo.from_dict(raw)
            except (TypeError, ValueError) as exc:
                raise ParseError(
                    f"Store file {self.path} has a malformed entry at index {index}: {exc}",
                    path=str(self.path),
                    details={"index": index},
                ) from exc
            if todo.id in seen:
                raise ParseError(
                    f"Store file {self.path} has duplicate todo id {todo.id}.",
                    path=str(self.path),
                    details={"index": index},
                )
            seen.add(todo.id)
            todos.append(todo)
        return todos
