"""
Core Domain - Todo Records

Defines the Todo record and the pure functions that operate on a flat,
insertion-ordered list of todos: id assignment, lookup, filtering and
input validation.

This is pure domain logic with NO persistence concerns. File I/O lives in
the infrastructure layer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable

from todo_cli.core.domain.enums import ListFilter, Priority
from todo_cli.core.domain.errors import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_due_date(value: str | date | None) -> date | None:
    """
    Parse a ``YYYY-MM-DD`` string into a calendar date.

    Args:
        value: Date string, date object or None

    Returns:
        The parsed date, or None when no value was given

    Raises:
        ValidationError: If the value is not a valid calendar date
    """
    if value is None or isinstance(value, date):
        return value
    text = str(value).strip()
    if not _ISO_DATE.match(text):
        raise ValidationError(
            f"Invalid due date '{value}': expected YYYY-MM-DD.",
            details={"due_date": value},
        )
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid due date '{value}': {exc}.", details={"due_date": value}
        ) from exc


def parse_priority(value: str | Priority) -> Priority:
    """Parse a priority name (case-insensitive) into a Priority."""
    if isinstance(value, Priority):
        return value
    try:
        return Priority(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in Priority)
        raise ValidationError(
            f"Invalid priority '{value}': expected one of {allowed}.",
            details={"priority": value},
        ) from exc


def validate_description(value: str) -> str:
    """Return the stripped description, rejecting empty or blank text."""
    text = (value or "").strip()
    if not text:
        raise ValidationError("Description must not be empty.")
    return text


@dataclass
class Todo:
    """
    Single task record.

    Attributes:
        id: Positive integer, unique within the store
        description: Non-empty task text
        priority: high, medium or low
        due_date: Optional calendar date the task is due
        done: Completion flag
        created_at: Date the task was added (None for older records)
    """

    id: int
    description: str
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None
    done: bool = False
    created_at: date | None = None

    def mark_done(self) -> None:
        """Set the done flag. Re-marking a finished item is a no-op."""
        self.done = True

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the Todo to a serializable dict.

        Returns:
            Dictionary representation matching the persisted file format
        """
        return {
            "id": self.id,
            "description": self.description,
            "priority": self.priority.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "done": self.done,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        """
        Build a Todo from its persisted dict form.

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            todo_id = data["id"]
            description = data["description"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc
        # bool is an int subclass
        if not isinstance(todo_id, int) or isinstance(todo_id, bool) or todo_id < 1:
            raise ValueError(f"invalid id {todo_id!r}")
        if not isinstance(description, str):
            raise ValueError(f"invalid description for todo #{todo_id}")
        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"invalid done flag for todo #{todo_id}")

        due_date = data.get("due_date")
        created_at = data.get("created_at")
        return cls(
            id=todo_id,
            description=description,
            priority=Priority(data.get("priority", Priority.MEDIUM.value)),
            due_date=date.fromisoformat(due_date) if due_date else None,
            done=done,
            created_at=date.fromisoformat(created_at) if created_at else None,
        )


def next_id(todos: Iterable[Todo]) -> int:
    """Return the id for a new todo: one past the highest existing id."""
    return max((todo.id for todo in todos), default=0) + 1


def find_todo(todos: Iterable[Todo], todo_id: int) -> Todo | None:
    """Find a todo by id."""
    for todo in todos:
        if todo.id == todo_id:
            return todo
    return None


def filter_todos(todos: Iterable[Todo], list_filter: ListFilter) -> list[Todo]:
    """Return the todos selected by the filter, keeping their order."""
    return [todo for todo in todos if list_filter.matches(todo.done)]
