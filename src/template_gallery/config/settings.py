"""Global configuration manager for INI settings."""

import configparser
import logging
from pathlib import Path

from template_gallery.config.parser import (
    ConfigCommentManager,
    _strip_inline_comment,
)
from template_gallery.config.paths import Paths
from template_gallery.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NUGET_MAX_RESULTS,
    DEFAULT_NUGET_PAGE_SIZE,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    DIRECTORY_KEYS,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_INCLUDE_PRERELEASE,
    KEY_LOG_LEVEL,
    KEY_MAX_RESULTS,
    KEY_PAGE_SIZE,
    KEY_RETRY_ATTEMPTS,
    KEY_SEARCH_URL,
    KEY_TIMEOUT_SECONDS,
    NUGET_SEARCH_URL,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_NUGET,
)
from template_gallery.types import (
    DirectoryConfig,
    GlobalConfig,
    NetworkConfig,
    NuGetConfig,
)

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                KEY_RETRY_ATTEMPTS: str(DEFAULT_RETRY_ATTEMPTS),
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_NUGET: {
                KEY_SEARCH_URL: NUGET_SEARCH_URL,
                KEY_PAGE_SIZE: str(DEFAULT_NUGET_PAGE_SIZE),
                KEY_MAX_RESULTS: str(DEFAULT_NUGET_MAX_RESULTS),
                KEY_INCLUDE_PRERELEASE: "false",
            },
            SECTION_DIRECTORY: {
                "builtin": str(Paths.builtin_templates_dir()),
                "installed": str(Paths.INSTALLED_PACKAGES_DIR),
                "logs": str(self.config_dir / "logs"),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        A commented settings file with defaults is written on first use.
        User values override defaults key by key.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            config.read(self.settings_file, encoding="utf-8")
        else:
            logger.debug(
                "Creating default configuration at %s", self.settings_file
            )
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_NETWORK: {
                key: str(value) for key, value in config["network"].items()
            },
            SECTION_NUGET: {
                KEY_SEARCH_URL: config["nuget"]["search_url"],
                KEY_PAGE_SIZE: str(config["nuget"]["page_size"]),
                KEY_MAX_RESULTS: str(config["nuget"]["max_results"]),
                KEY_INCLUDE_PRERELEASE: str(
                    config["nuget"]["include_prerelease"]
                ).lower(),
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in config["directory"].items()
            },
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())

            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert configparser to typed GlobalConfig.

        Args:
            config: Parsed configuration with defaults applied

        Returns:
            Typed global configuration

        """

        def get(section: str, key: str, fallback: str) -> str:
            # DEFAULT keys live in defaults(), not in a named section
            if section == SECTION_DEFAULT:
                value = config.defaults().get(key, fallback)
            else:
                value = config.get(section, key, raw=True, fallback=fallback)
            return _strip_inline_comment(value)

        def get_int(section: str, key: str, fallback: int) -> int:
            value = get(section, key, str(fallback))
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Invalid integer for %s.%s: %r, using %d",
                    section,
                    key,
                    value,
                    fallback,
                )
                return fallback

        defaults = self.get_default_global_config()
        default_dirs: dict[str, str] = defaults[SECTION_DIRECTORY]  # type: ignore[assignment]

        directory = {
            key: Paths.expand_path(
                get(SECTION_DIRECTORY, key, default_dirs[key])
            )
            for key in DIRECTORY_KEYS
        }

        return GlobalConfig(
            config_version=get(
                SECTION_DEFAULT, KEY_CONFIG_VERSION, CONFIG_VERSION
            ),
            log_level=get(SECTION_DEFAULT, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            console_log_level=get(
                SECTION_DEFAULT,
                KEY_CONSOLE_LOG_LEVEL,
                DEFAULT_CONSOLE_LOG_LEVEL,
            ),
            network=NetworkConfig(
                retry_attempts=get_int(
                    SECTION_NETWORK, KEY_RETRY_ATTEMPTS, DEFAULT_RETRY_ATTEMPTS
                ),
                timeout_seconds=get_int(
                    SECTION_NETWORK,
                    KEY_TIMEOUT_SECONDS,
                    DEFAULT_TIMEOUT_SECONDS,
                ),
            ),
            nuget=NuGetConfig(
                search_url=get(SECTION_NUGET, KEY_SEARCH_URL, NUGET_SEARCH_URL),
                page_size=get_int(
                    SECTION_NUGET, KEY_PAGE_SIZE, DEFAULT_NUGET_PAGE_SIZE
                ),
                max_results=get_int(
                    SECTION_NUGET, KEY_MAX_RESULTS, DEFAULT_NUGET_MAX_RESULTS
                ),
                include_prerelease=get(
                    SECTION_NUGET, KEY_INCLUDE_PRERELEASE, "false"
                ).lower()
                in _TRUE_VALUES,
            ),
            directory=DirectoryConfig(
                builtin=directory["builtin"],
                installed=directory["installed"],
                logs=directory["logs"],
            ),
        )
