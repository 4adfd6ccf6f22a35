"""Centralized constants module for template-gallery.

Constants are organized by logical categories and use typing.Final
annotations to ensure immutability.

Usage:
    from template_gallery.constants import CONFIG_VERSION
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"

CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Default config directory name under the user's home directory
CONFIG_DIR_NAME: Final[str] = ".config"

# Application-specific subdirectory under the config directory
DEFAULT_CONFIG_SUBDIR: Final[str] = "template-gallery"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_NUGET: Final[str] = "nuget"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_RETRY_ATTEMPTS: Final[str] = "retry_attempts"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_SEARCH_URL: Final[str] = "search_url"
KEY_PAGE_SIZE: Final[str] = "page_size"
KEY_MAX_RESULTS: Final[str] = "max_results"
KEY_INCLUDE_PRERELEASE: Final[str] = "include_prerelease"

DIRECTORY_KEYS: Final[tuple[str, ...]] = (
    "builtin",
    "installed",
    "logs",
)

# =============================================================================
# NuGet Constants
# =============================================================================

NUGET_SEARCH_URL: Final[str] = "https://azuresearch-usnc.nuget.org/query"
NUGET_TEMPLATE_PACKAGE_TYPE: Final[str] = "Template"
DEFAULT_NUGET_PAGE_SIZE: Final[int] = 100
DEFAULT_NUGET_MAX_RESULTS: Final[int] = 1000

# Environment variable pointing at the dotnet installation root
DOTNET_ROOT_ENV: Final[str] = "DOTNET_ROOT"
DEFAULT_DOTNET_ROOT: Final[str] = "/usr/share/dotnet"
DOTNET_EXECUTABLE: Final[str] = "dotnet"

# Template engine cache of user-installed template packages
TEMPLATE_ENGINE_PACKAGES_SUBPATH: Final[tuple[str, ...]] = (
    ".templateengine",
    "packages",
)

# =============================================================================
# Package Archive Constants
# =============================================================================

PACKAGE_GLOB: Final[str] = "*.nupkg"

CONTENT_DIR: Final[str] = "content"
TEMPLATE_CONFIG_DIR: Final[str] = ".template.config"
TEMPLATE_MANIFEST_FILE: Final[str] = "template.json"
IDE_HOST_MANIFEST_FILE: Final[str] = "ide.host.json"

ICON_DATA_URI_TEMPLATE: Final[str] = "data:image/{ext};base64,{payload}"

# =============================================================================
# Logging Constants
# =============================================================================

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_DIR_ENV: Final[str] = "TEMPLATE_GALLERY_LOG_DIR"
LOG_FILE_NAME: Final[str] = "template-gallery.log"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Display Constants
# =============================================================================

MAX_VERSION_DISPLAY_LENGTH: Final[int] = 16
