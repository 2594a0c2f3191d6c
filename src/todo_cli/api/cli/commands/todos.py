"""Todo commands - add, list, done, remove.

Each command runs one load-mutate-save cycle through TodoService.
Domain errors are reported on stderr and mapped to a non-zero exit code.
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import structlog
import typer

from todo_cli.api.cli.output_formatter import TodoConsole
from todo_cli.application.todo_service import TodoService
from todo_cli.core.domain.enums import ListFilter, Priority
from todo_cli.core.domain.errors import TodoCliError
from todo_cli.core.domain.settings import TodoSettings
from todo_cli.infrastructure.persistence.file_todo_store import FileTodoStore

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def _settings(ctx: typer.Context) -> TodoSettings:
    global_opts = ctx.obj or {}
    return global_opts.get("settings") or TodoSettings()


def _run(
    ctx: typer.Context,
    todo_console: TodoConsole,
    operation: Callable[[TodoService], Awaitable[T]],
) -> T:
    """Run one service operation, turning domain errors into an exit code."""
    settings = _settings(ctx)
    service = TodoService(FileTodoStore(settings.store_path))
    try:
        return asyncio.run(operation(service))
    except TodoCliError as exc:
        logger.debug("command_failed", code=exc.code, details=exc.details)
        todo_console.print_error(exc.message)
        raise typer.Exit(exc.exit_code) from exc


def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="What needs to be done"),
    priority: Optional[Priority] = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="Priority level"
    ),
    due: Optional[str] = typer.Option(None, "--due", help="Due date in YYYY-MM-DD format"),
) -> None:
    """Add a new todo."""
    todo_console = TodoConsole()
    level = priority or _settings(ctx).default_priority

    todo = _run(ctx, todo_console, lambda service: service.add(description, level, due))
    todo_console.print_success(f"Added todo #{todo.id}: {todo.description}")


def list_todos(
    ctx: typer.Context,
    list_filter: Optional[ListFilter] = typer.Option(
        None, "--filter", "-f", case_sensitive=False, help="Which todos to show"
    ),
) -> None:
    """List todos."""
    todo_console = TodoConsole()
    selected = list_filter or _settings(ctx).default_filter

    todos = _run(ctx, todo_console, lambda service: service.list(selected))
    todo_console.print_todos(todos)


def done(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., metavar="ID", help="ID of the todo to complete"),
) -> None:
    """Mark a todo as completed."""
    todo_console = TodoConsole()

    _run(ctx, todo_console, lambda service: service.done(todo_id))
    todo_console.print_success(f"Marked todo #{todo_id} as done.")


def remove(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., metavar="ID", help="ID of the todo to remove"),
) -> None:
    """Remove a todo."""
    todo_console = TodoConsole()

    _run(ctx, todo_console, lambda service: service.remove(todo_id))
    todo_console.print_success(f"Removed todo #{todo_id}.")


def register(app: typer.Typer) -> None:
    """Attach the todo commands to the top-level application."""
    app.command("add")(add)
    app.command("list")(list_todos)
    app.command("done")(done)
    app.command("remove")(remove)
