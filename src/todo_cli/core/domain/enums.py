"""
Core Domain Enums

Defines the priority levels and list filters used across the CLI,
the service layer and the persisted file format.
"""

from enum import Enum


class Priority(str, Enum):
    """Priority of a todo item."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ListFilter(str, Enum):
    """View selector applied when listing todos."""

    PENDING = "pending"
    DONE = "done"
    ALL = "all"

    def matches(self, done: bool) -> bool:
        """Return True if an item with the given done flag is selected."""
        if self is ListFilter.ALL:
            return True
        if self is ListFilter.DONE:
            return done
        return not done


class LogLevel(str, Enum):
    """Log levels accepted in the settings file."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
