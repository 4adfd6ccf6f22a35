"""INI parser utilities for template-gallery configuration."""

from datetime import UTC, datetime

from template_gallery.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_NUGET,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')
    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# template-gallery configuration
# You can modify these values to customize the behavior of the application.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section.

        Returns:
            Dictionary mapping section names to their comment strings
        """
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)

""",
            SECTION_NETWORK: """
# ========================================
# NETWORK CONFIGURATION
# ========================================
# retry_attempts: Number of times to retry failed catalog requests (1-10)
# timeout_seconds: Seconds to wait before timing out requests (5-60)

""",
            SECTION_NUGET: """
# ========================================
# TEMPLATE CATALOG
# ========================================
# search_url: NuGet search endpoint queried for template packages
# page_size: Results requested per page
# max_results: Upper bound on catalog size
# include_prerelease: Whether prerelease packages are listed (true/false)

""",
            SECTION_DIRECTORY: """
# ========================================
# DIRECTORY PATHS
# ========================================
# Use absolute paths or paths starting with ~ for home directory.
#
# builtin: Template packages shipped with the dotnet SDK
# installed: Template packages installed with 'dotnet new install'
# logs: Log files location

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys."""
        return {
            SECTION_DEFAULT: {
                "config_version": "# DO NOT MODIFY - Config format version",
                "log_level": "# File log level",
                "console_log_level": "# Console log level",
            },
            SECTION_NETWORK: {
                "retry_attempts": "# Retry failed requests",
                "timeout_seconds": "# Request timeout in seconds",
            },
            SECTION_NUGET: {},
            SECTION_DIRECTORY: {},
        }
