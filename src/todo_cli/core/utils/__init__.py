"""
Core utilities module.

Provides shared utility functions used across all layers.
"""

from todo_cli.core.utils.paths import (
    default_config_path,
    default_store_path,
    get_home_dir,
)
from todo_cli.core.utils.time import local_today

__all__ = ["default_config_path", "default_store_path", "get_home_dir", "local_today"]
