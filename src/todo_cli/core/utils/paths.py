"""
Path utilities for locating the store and settings files.

All defaults live under the user's home directory.
"""

import os
from pathlib import Path

STORE_FILENAME = ".todo-cli.json"

STORE_ENV_VAR = "TODO_CLI_STORE"
CONFIG_ENV_VAR = "TODO_CLI_CONFIG"


def get_home_dir() -> Path:
    """Return the current user's home directory."""
    return Path.home()


def default_store_path() -> Path:
    """Return the default store file, ``~/.todo-cli.json``."""
    return get_home_dir() / STORE_FILENAME


def default_config_path() -> Path:
    """
    Return the default settings file location.

    Honours ``XDG_CONFIG_HOME`` and falls back to ``~/.config``.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else get_home_dir() / ".config"
    return base / "todo-cli" / "config.yaml"
