from __future__ import annotations
import logging

ROOT_LOGGER_NAME = "rulerkit"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the rulerkit logger. Safe to call more than once."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear duplicate handlers if reinit
    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    ch.setLevel(level)
    logger.addHandler(ch)

    logger.debug("%s logging initialised at level %s", ROOT_LOGGER_NAME, logging.getLevelName(level))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger in the rulerkit namespace.
    Usage: from rulerkit.logging import get_logger; log = get_logger(__name__)
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
