"""Filesystem locations used by podfeed."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "podfeed"


def get_config_dir() -> Path:
    """Return the per-user configuration directory."""
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Return the path of the main configuration file."""
    return get_config_dir() / "config.yaml"
