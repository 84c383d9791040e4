import logging
import os

LOG_LEVEL_ENV = "FIELDGUARD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_for(name: str) -> int:
    # command output is informational; validators only speak when asked
    fallback = logging.INFO if name.endswith(".cli") else logging.WARNING
    requested = os.getenv(LOG_LEVEL_ENV)
    if not requested:
        return fallback
    level = logging.getLevelName(requested.upper())
    return level if isinstance(level, int) else fallback


def get_logger(name: str) -> logging.Logger:
    """Return a fieldguard logger writing to stderr, configured once per name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_for(name))
    return logger
