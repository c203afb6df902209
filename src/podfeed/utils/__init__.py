"""Utility functions and helpers for podfeed."""

from podfeed.utils.errors import (
    ConfigError,
    InvalidConfigError,
    NamespaceConflictError,
    PodfeedError,
)
from podfeed.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodfeedError",
    "ConfigError",
    "InvalidConfigError",
    "NamespaceConflictError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
