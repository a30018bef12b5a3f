"""Package-wide logging for SafeRoute.

Every module logs through ``get_logger(__name__)``; records flow up to the
``saferoute`` logger, which owns the only handler. The search itself logs at
DEBUG, loaders and the CLI at INFO.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "saferoute"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the handler of the ``saferoute`` logger.

    Only the first call has an effect; ``reset_logging`` re-arms it.

    Args:
        level: Initial level of the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler, a stdout stream handler when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED
    if _ROOT_LOGGER_CONFIGURED:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the real root logger
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Module logger whose level is decided by the ``saferoute`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and to its handlers."""
    setup_root_logger()
    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def level_for_verbosity(verbose: bool = False, quiet: bool = False) -> int:
    """Map command-line verbosity flags to a level; ``verbose`` wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level. Used by tests."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False
    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
