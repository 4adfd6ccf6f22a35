"""Logging utilities for template-gallery.

Structured logging with:
- Colored console output, message-only for INFO
- File rotation using RotatingFileHandler
- Async-safe logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., template_gallery.core.inspector)

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from template_gallery.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Found %d templates", count)  # Use %-style formatting

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from typing import TYPE_CHECKING

from template_gallery.logger.config import (
    update_logger_from_config as _update_config,
)
from template_gallery.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from template_gallery.logger.handlers import ConfigurationError
from template_gallery.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    restore_console_level,
    set_console_level,
    setup_logging,
)
from template_gallery.logger.state import get_state

if TYPE_CHECKING:
    from template_gallery.types import GlobalConfig

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "restore_console_level",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "GlobalConfig | None" = None) -> None:
    """Update logger handler levels from global config."""
    _update_config(get_state(), config)
