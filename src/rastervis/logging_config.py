"""
Logging Configuration
=====================
Console (and optionally file) logging for the 'rastervis' package.

The level and log file can be chosen without code changes through
RASTERVIS_LOG_LEVEL (name like DEBUG, or a number) and RASTERVIS_LOG_FILE.
"""
import logging
import os
import sys
from typing import Mapping, Optional, Union

PACKAGE_LOGGER = "rastervis"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(value: Union[int, str, None], default: int = logging.INFO) -> int:
    """Accepts a level number, a level name ('debug', 'WARNING') or None."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """
    Attach a stdout handler (and a file handler if requested) to the package logger.

    Environment variables win over the arguments. Calling this again replaces
    the previous handlers instead of stacking them.
    """
    env = os.environ if environ is None else environ
    level = resolve_level(env.get("RASTERVIS_LOG_LEVEL"), default=resolve_level(level))
    log_file = env.get("RASTERVIS_LOG_FILE") or log_file

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized at %s%s.", logging.getLevelName(level),
                f", writing to {log_file}" if log_file else "")
    return logger
