"""Main logger module providing public API functions.

- setup_logging(): Configure logging with async-safe QueueHandler architecture
- get_logger(): Get or create a module logger
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
- set_console_level()/restore_console_level(): Temporary console verbosity
"""

import atexit
import contextlib
import logging
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from template_gallery.logger.config import load_log_settings
from template_gallery.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from template_gallery.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes every listener handler.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > _FLUSH_TIMEOUT_SECONDS:
                break
            time.sleep(0.01)

        # Give the listener thread time to hand off the final record
        time.sleep(0.1)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging with async-safe QueueHandler architecture.

    The root ``template_gallery`` logger is initialized exactly once; child
    loggers propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get or create logger instance.

    Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)
        >>> logger.info("Inspecting %s", archive_path)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging (default: True)

    Returns:
        Configured logger instance

    """
    return setup_logging(
        name=name,
        enable_file_logging=enable_file_logging,
    )


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and resets state flags so the
    next get_logger() call starts from scratch.

    Warning:
        Intended for tests only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)


def _console_handler() -> logging.Handler | None:
    state = get_state()
    if state.queue_listener is None:
        return None
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            return handler
    return None


def set_console_level(level: str) -> int | None:
    """Change the console handler level, returning the previous level.

    Used by ``--verbose``; hand the returned value to restore_console_level()
    afterwards. Returns None when no console handler is active.
    """
    handler = _console_handler()
    if handler is None:
        return None
    previous = handler.level
    handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    return previous


def restore_console_level(previous: int | None) -> None:
    """Restore a console level returned by set_console_level()."""
    handler = _console_handler()
    if handler is not None and previous is not None:
        handler.setLevel(previous)
