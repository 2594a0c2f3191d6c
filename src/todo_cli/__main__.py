"""Allow ``python -m todo_cli``."""

from todo_cli.api.cli.main import app

app()
