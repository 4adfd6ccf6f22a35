"""Configuration loading and updating for logging system.

The config package logs through this package, so settings.conf is only
consulted after startup via update_logger_from_config(); bootstrap values
come from constants and the environment.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from template_gallery.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from template_gallery.logger.state import _LoggerState
    from template_gallery.types import GlobalConfig


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        TEMPLATE_GALLERY_LOG_DIR: Overrides the log directory. The test suite
        sets it so runs never write into the user's config directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR / "logs"

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_dir / LOG_FILE_NAME


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig | None" = None
) -> None:
    """Update logger handler levels from global config.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)
        config: Already loaded global config; settings.conf is read when
            omitted

    """
    try:
        if config is None:
            # Import here to avoid circular dependency
            from template_gallery.config import ConfigManager  # noqa: PLC0415

            config = ConfigManager().load_global_config()

        console_level = getattr(
            logging,
            config.get("console_log_level", DEFAULT_CONSOLE_LOG_LEVEL),
            logging.INFO,
        )
        file_level = getattr(
            logging, config.get("log_level", DEFAULT_LOG_LEVEL), logging.INFO
        )

        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

        state.config_applied = True

    except (ImportError, KeyError, AttributeError):
        # Config module not fully initialized yet, keep bootstrap defaults
        pass
