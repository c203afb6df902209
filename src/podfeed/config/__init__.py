"""Configuration loading and logging setup."""

from podfeed.config.logging import setup_logging
from podfeed.config.manager import ConfigManager
from podfeed.config.schema import ParserConfig

__all__ = ["ConfigManager", "ParserConfig", "setup_logging"]
