"""Domain-specific exception types for todo-cli."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TodoCliError(Exception):
    """Base exception for todo-cli domain errors."""

    message: str
    code: str = "todo_cli_error"
    details: Dict[str, Any] | None = None
    exit_code: int = 1

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class FileIOError(TodoCliError):
    """Error raised when the store file cannot be read or written."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        self.path = path
        super().__init__(message=message, code="file_io_error", details=details)


class ParseError(TodoCliError):
    """Error raised when the store file holds malformed JSON or records."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        self.path = path
        super().__init__(message=message, code="parse_error", details=details)


class ValidationError(TodoCliError):
    """Error raised for invalid user input."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="validation_error", details=details)


class NotFoundError(TodoCliError):
    """Error raised when no todo has the requested id."""

    def __init__(self, todo_id: int, *, details: Dict[str, Any] | None = None) -> None:
        details = dict(details or {})
        details.setdefault("todo_id", todo_id)
        self.todo_id = todo_id
        super().__init__(
            message=f"Todo #{todo_id} not found.", code="not_found", details=details
        )


class ConfigError(TodoCliError):
    """Error raised for settings file failures."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)
