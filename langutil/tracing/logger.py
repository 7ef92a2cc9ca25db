"""Tracing and logging for langutil."""

import logging
import sys

# Finer than DEBUG; used for per-lookup trace records.
FINE = 5
logging.addLevelName(FINE, "FINE")

LOGGER_NAME = "langutil"


def _setup_handler(logger: logging.Logger) -> None:
    """Setup console handler with formatting."""
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def _parse_level(log_level: str | int) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_tracing(log_level: str | int = "INFO") -> logging.Logger:
    """Setup console tracing for every ``langutil`` logger.

    Args:
        log_level: Logging level (FINE, DEBUG, INFO, WARNING, ERROR).

    Returns:
        The configured package logger.

    Raises:
        ValueError: If the level name is not known to ``logging``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _setup_handler(logger)
    logger.setLevel(_parse_level(log_level))
    return logger


def log_fine(logger: logging.Logger, message: str, *args) -> None:
    """Log a FINE level trace record."""
    if logger.isEnabledFor(FINE):
        logger.log(FINE, message, *args)
