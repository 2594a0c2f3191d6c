"""Config command - Settings inspection."""

import typer
from rich.console import Console
from rich.table import Table

from todo_cli.core.domain.settings import TodoSettings

app = typer.Typer(help="Settings management")
console = Console()


@app.command("show")
def show_settings(ctx: typer.Context):
    """Show the resolved settings for this invocation."""
    global_opts = ctx.obj or {}
    settings: TodoSettings = global_opts.get("settings") or TodoSettings()
    config_path = global_opts.get("config_path")

    if config_path:
        console.print(f"[bold]Settings file:[/bold] {config_path}\n", soft_wrap=True)
    console.print_json(data=settings.model_dump(mode="json"))


@app.command("fields")
def list_fields():
    """List the keys accepted in the settings file."""
    table = Table(title="Settings Keys")
    table.add_column("Key", style="cyan")
    table.add_column("Default", style="white")
    table.add_column("Description", style="dim")

    defaults = TodoSettings()
    for name, field in TodoSettings.model_fields.items():
        value = getattr(defaults, name)
        table.add_row(name, str(getattr(value, "value", value)), field.description or "")

    console.print(table)
