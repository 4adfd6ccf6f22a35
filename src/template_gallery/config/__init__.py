"""Configuration management - settings and path utilities.

This package provides:
- ConfigManager: Unified facade for configuration operations
- GlobalConfigManager: INI configuration management (from settings.py)
- Paths: Path constants and utilities (from paths.py)
- ConfigCommentManager: Comments written into settings.conf (from parser.py)
"""

from template_gallery.config.config import ConfigManager
from template_gallery.config.parser import ConfigCommentManager
from template_gallery.config.paths import Paths
from template_gallery.config.settings import GlobalConfigManager
from template_gallery.types import GlobalConfig

__all__ = [
    "ConfigCommentManager",
    "ConfigManager",
    "GlobalConfig",
    "GlobalConfigManager",
    "Paths",
]
