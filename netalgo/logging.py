"""Centralized logging configuration for netalgo."""

import logging
import sys
from typing import Callable, Optional, Union

from netalgo.config import ALGORITHM_CONFIG

ROOT_LOGGER_NAME = "netalgo"

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root netalgo logger with a single handler.

    Repeated calls are ignored until `reset_logging()` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Let logs propagate to root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the package configuration.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Logger instance whose level is inherited from the 'netalgo' logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all netalgo loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


def log_progress(
    logger: logging.Logger,
    count: int,
    message: Union[str, Callable[[], str]],
) -> bool:
    """Log a DEBUG progress line when `count` reaches the configured interval.

    Long-running loops call this once per iteration. The line is emitted every
    `ALGORITHM_CONFIG.progress_log_interval` iterations and only while DEBUG
    is enabled for `logger`; a callable `message` is evaluated only then.

    Args:
        logger: Logger of the calling module.
        count: Iterations completed so far.
        message: Progress text, or a callable producing it.

    Returns:
        True if a line was logged.
    """
    if not ALGORITHM_CONFIG.should_log_progress(count):
        return False
    if not logger.isEnabledFor(logging.DEBUG):
        return False
    logger.debug(message() if callable(message) else message)
    return True


setup_root_logger()
