"""Persistence implementations for todo-cli."""

from todo_cli.infrastructure.persistence.file_todo_store import FileTodoStore

__all__ = ["FileTodoStore"]
