"""Rich output formatting for the todo CLI.

Command results go to stdout; errors go to stderr.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from todo_cli.core.domain.enums import Priority
from todo_cli.core.domain.todo import Todo

TODO_THEME = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "info": "white",
        "muted": "dim",
        "priority.high": "bold red",
        "priority.medium": "yellow",
        "priority.low": "green",
    }
)


class TodoConsole:
    """Console wrapper with the todo CLI's styling."""

    def __init__(self):
        self.console = Console(theme=TODO_THEME)
        self.err_console = Console(theme=TODO_THEME, stderr=True)

    def print_success(self, message: str):
        self.console.print(f"[success]{escape(message)}[/success]", soft_wrap=True)

    def print_info(self, message: str):
        self.console.print(f"[info]{escape(message)}[/info]", soft_wrap=True)

    def print_error(self, message: str):
        """Print an error message to stderr."""
        self.err_console.print(f"[error]Error:[/error] {escape(message)}", soft_wrap=True)

    def print_todos(self, todos: list[Todo]):
        """Print todos as a table, or a notice when there are none.

        Args:
            todos: Todos to show, already filtered and in display order
        """
        if not todos:
            self.console.print("[muted]No todos found.[/muted]")
            return

        table = Table(show_edge=False, header_style="bold")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Done")
        table.add_column("Priority")
        table.add_column("Due")
        table.add_column("Description", overflow="fold")

        for todo in todos:
            table.add_row(
                str(todo.id),
                escape("[x]") if todo.done else escape("[ ]"),
                _format_priority(todo.priority),
                todo.due_date.isoformat() if todo.due_date else "-",
                escape(todo.description),
            )

        self.console.print(table)


def _format_priority(priority: Priority) -> str:
    return f"[priority.{priority.value}]{priority.value}[/priority.{priority.value}]"
