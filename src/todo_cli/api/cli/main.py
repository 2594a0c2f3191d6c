"""todo-cli entry point."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from todo_cli.api.cli.commands import config, todos
from todo_cli.api.cli.logging_config import setup_logging
from todo_cli.api.cli.output_formatter import TodoConsole
from todo_cli.application.settings_loader import SettingsLoader
from todo_cli.core.domain.errors import ConfigError

app = typer.Typer(
    name="todo",
    help="todo - a simple personal todo list",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register commands
todos.register(app)
app.add_typer(config.app, name="config", help="Settings management")


@app.callback()
def main(
    ctx: typer.Context,
    store: Optional[Path] = typer.Option(
        None, "--store", "-s", help="Path of the JSON store file"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path of the YAML settings file"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """todo CLI."""
    # Configure before the settings loader binds its logger
    setup_logging("DEBUG" if debug else "WARNING")
    try:
        settings = SettingsLoader().load(config_path=config_path, store_path=store)
    except ConfigError as exc:
        TodoConsole().print_error(exc.message)
        raise typer.Exit(exc.exit_code) from exc

    setup_logging("DEBUG" if debug else settings.log_level.value)

    # Store global options in context for subcommands
    ctx.obj = {"settings": settings, "config_path": config_path, "debug": debug}


@app.command()
def version():
    """Show todo-cli version."""
    from todo_cli import __version__

    console.print(f"[bold blue]todo-cli[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
