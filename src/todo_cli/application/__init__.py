"""Application services: command handlers and settings resolution."""

from todo_cli.application.settings_loader import SettingsLoader
from todo_cli.application.todo_service import TodoService

__all__ = ["SettingsLoader", "TodoService"]
