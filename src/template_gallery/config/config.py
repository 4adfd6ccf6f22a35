"""Configuration facade for template-gallery.

- settings.py: GlobalConfigManager for INI configuration
- parser.py: INI comment helpers
- paths.py: Path constants and utilities
"""

import logging
from pathlib import Path

from template_gallery.config.paths import Paths
from template_gallery.config.settings import GlobalConfigManager
from template_gallery.types import GlobalConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Facade that coordinates configuration managers."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Optional custom config directory.
                Defaults to Paths.CONFIG_DIR
        """
        self._config_dir = config_dir or Paths.CONFIG_DIR
        self.global_config_manager = GlobalConfigManager(self._config_dir)
        Paths.ensure_directories(self._config_dir)

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self.global_config_manager.settings_file

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration."""
        return self.global_config_manager.load_global_config()

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration."""
        self.global_config_manager.save_global_config(config)
