"""
Settings Loader
===============

Loads and resolves the optional YAML settings file.

Responsibilities:
- Locate the settings file (explicit path, environment, default location)
- Validate it against the Pydantic schema
- Apply environment and command-line overrides on top
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml

from todo_cli.core.domain.errors import ConfigError
from todo_cli.core.domain.settings import (
    SettingsValidationError,
    TodoSettings,
    validate_settings,
)
from todo_cli.core.utils.paths import CONFIG_ENV_VAR, STORE_ENV_VAR, default_config_path

logger = structlog.get_logger(__name__)


class SettingsLoader:
    """Load and resolve todo-cli settings.

    Search order for the settings file:
    1. ``config_path`` passed explicitly (``--config``)
    2. ``$TODO_CLI_CONFIG``
    3. ``~/.config/todo-cli/config.yaml`` (skipped silently when absent)

    Args:
        environ: Environment mapping, ``os.environ`` by default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._logger = logger.bind(component="settings_loader")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(
        self,
        config_path: str | Path | None = None,
        store_path: str | Path | None = None,
    ) -> TodoSettings:
        """Resolve settings for one invocation.

        Args:
            config_path: Explicit settings file; must exist if given.
            store_path: Store path override from the command line.

        Returns:
            Validated settings with all overrides applied.

        Raises:
            ConfigError: If a named settings file is missing, unreadable or invalid.
        """
        path, explicit = self._resolve_config_path(config_path)
        data: dict[str, Any] = {}
        if path is not None:
            if path.exists():
                data = self._read_yaml(path)
            elif explicit:
                raise ConfigError(f"Settings file not found: {path}")

        env_store = self._environ.get(STORE_ENV_VAR)
        if env_store:
            data["store_path"] = env_store
        if store_path:
            data["store_path"] = store_path

        try:
            settings = validate_settings(data, file_path=path)
        except SettingsValidationError as exc:
            raise ConfigError(str(exc), details={"path": str(path)}) from exc

        self._logger.debug(
            "settings_loaded",
            config_path=str(path) if path else None,
            store_path=str(settings.store_path),
        )
        return settings

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_config_path(self, config_path: str | Path | None) -> tuple[Path | None, bool]:
        if config_path:
            return Path(config_path).expanduser(), True
        env_path = self._environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser(), True
        return default_config_path(), False

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Failed to read settings file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Settings file {path} is not valid YAML: {exc}") from exc

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping.")
        return loaded
