"""
Domain Models and Business Logic

This package contains the core domain models for todo-cli:
- Todo record and list helpers
- Priority and filter enums
- Error types
- Settings schema
"""

from todo_cli.core.domain.enums import ListFilter, LogLevel, Priority
from todo_cli.core.domain.errors import (
    ConfigError,
    FileIOError,
    NotFoundError,
    ParseError,
    TodoCliError,
    ValidationError,
)
from todo_cli.core.domain.todo import Todo

__all__ = [
    "ConfigError",
    "FileIOError",
    "ListFilter",
    "LogLevel",
    "NotFoundError",
    "ParseError",
    "Priority",
    "Todo",
    "TodoCliError",
    "ValidationError",
]
