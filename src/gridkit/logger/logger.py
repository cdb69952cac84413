"""Project logger, configured from `gridkit.config.settings`.

The level, message format and date format all come from the settings model,
so ``GRIDKIT_LOG_LEVEL`` (or ``LOG_LEVEL``), ``GRIDKIT_LOG_FORMAT`` and
``GRIDKIT_LOG_DATE_FORMAT`` apply without code changes.
"""

import logging
import sys

from gridkit.config import Settings, settings

__all__ = ["logger", "setup_logger", "set_level"]


def setup_logger(
    name: str = "gridkit",
    level: str | None = None,
    config: Settings | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to stdout.

    Args:
        name: Logger name (typically project name)
        level: Log level overriding the configured one
        config: Settings to read level and formats from, defaults to the
            module-level settings

    Returns:
        Configured logger instance. A logger that already has handlers is
        returned unchanged.
    """
    config = config or settings
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    )
    logger.addHandler(handler)
    logger.propagate = False
    return set_level(level or config.LOG_LEVEL, name)


def set_level(level: str, name: str = "gridkit") -> logging.Logger:
    """Change the level of a logger, by level name."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    return logger


logger = setup_logger()
