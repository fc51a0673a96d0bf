"""
Logging for trajtheme.

All module loggers hang off the ``trajtheme`` logger, so one call to
``setup_logging`` (done by ``python -m trajtheme``) routes scheme switches,
settings warnings and skipped user schemes to the chosen sinks.

    from trajtheme.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = 'trajtheme'
DEFAULT_LOG_FILE = '/tmp/trajtheme_debug.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    console: bool = False
) -> logging.Logger:
    """
    Replace the handlers on the ``trajtheme`` logger.

    Args:
        level: Log level name; unknown names fall back to WARNING
        log_file: Written (truncated) only when level is DEBUG or INFO
        console: Also log to stderr

    Returns:
        The configured ``trajtheme`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file and numeric_level <= logging.INFO:
        _attach(logger, logging.FileHandler(log_file, mode='w'), numeric_level)
    if console:
        _attach(logger, logging.StreamHandler(sys.stderr), numeric_level)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging configured: level={level}, log_file={log_file}, console={console}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, parented under ``trajtheme``."""
    if name == ROOT_LOGGER or name.startswith(f'{ROOT_LOGGER}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
