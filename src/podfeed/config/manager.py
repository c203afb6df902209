"""Configuration manager for loading and saving podfeed config."""

from pathlib import Path

import yaml

from podfeed.config.schema import ParserConfig
from podfeed.utils.errors import InvalidConfigError
from podfeed.utils.paths import get_config_dir, get_config_file

DEFAULT_CONFIG_CONTENT = """\
# podfeed configuration
version: "1"

# DEBUG logs every element or episode dropped while parsing
log_level: WARNING

# Extension namespaces to interpret; remove an entry to ignore its elements
namespaces:
  - atom
  - content
  - feedpress
  - googleplay
  - itunes
  - podcast
  - psc
"""


class ConfigManager:
    """Manages the podfeed configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the user config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> ParserConfig:
        """Load and validate configuration.

        Returns:
            Validated ParserConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return ParserConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return ParserConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: ParserConfig) -> None:
        """Save configuration.

        Args:
            config: ParserConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(DEFAULT_CONFIG_CONTENT)
