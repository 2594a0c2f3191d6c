"""
Settings Schema Validation

Pydantic model for the optional YAML settings file. Unknown keys are
rejected so that typos surface as errors instead of being ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_cli.core.domain.enums import ListFilter, LogLevel, Priority
from todo_cli.core.utils.paths import default_store_path


class TodoSettings(BaseModel):
    """Resolved settings for a todo-cli invocation."""

    model_config = ConfigDict(extra="forbid")

    store_path: Path = Field(
        default_factory=default_store_path,
        description="JSON file holding the todo list",
    )
    default_filter: ListFilter = Field(
        ListFilter.PENDING,
        description="Filter used by 'list' when --filter is not given",
    )
    default_priority: Priority = Field(
        Priority.MEDIUM,
        description="Priority used by 'add' when --priority is not given",
    )
    log_level: LogLevel = Field(LogLevel.WARNING, description="Minimum log level")

    @field_validator("store_path", mode="before")
    @classmethod
    def expand_store_path(cls, value: Any) -> Any:
        """Expand ``~`` in the configured store path."""
        if isinstance(value, (str, Path)):
            return Path(value).expanduser()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class SettingsValidationError(Exception):
    """
    Error raised when settings validation fails.

    Includes file path and detailed error message.
    """

    def __init__(self, message: str, file_path: Optional[Path] = None):
        self.file_path = file_path
        parts = []
        if file_path:
            parts.append(f"File: {file_path}")
        parts.append(message)
        super().__init__(" | ".join(parts))


def validate_settings(
    data: dict[str, Any],
    file_path: Optional[Path] = None,
) -> TodoSettings:
    """
    Validate settings data.

    Args:
        data: Settings dictionary
        file_path: Optional file path for error messages

    Returns:
        Validated TodoSettings

    Raises:
        SettingsValidationError: If validation fails
    """
    try:
        return TodoSettings(**data)
    except Exception as e:
        raise SettingsValidationError(str(e), file_path=file_path) from e
