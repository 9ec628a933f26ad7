"""
Logging Configuration
Sets up the package logger for the game.

The level can be forced with the ROOTWORDS_LOG_LEVEL environment variable
(e.g. ROOTWORDS_LOG_LEVEL=DEBUG to trace every selected letter).
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _level_from_env(default: int) -> int:
    name = os.environ.get("ROOTWORDS_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'rootwords' namespace and returns it.

    Args:
        level: Logging level used unless ROOTWORDS_LOG_LEVEL overrides it.
        log_file: Optional path to also write the log to.
    """
    level = _level_from_env(level)
    logger = logging.getLogger("rootwords")
    logger.setLevel(level)

    # Re-running setup (new game window, tests) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
