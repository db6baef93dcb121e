"""
Logger setup for UltiCode mock tooling.

All modules log under the ``ulticode.mocks`` namespace:

    ulticode.mocks.data        YAML/JSON source reading
    ulticode.mocks.loader      database merging and caching
    ulticode.mocks.validation  per-pass counts
    ulticode.mocks.startup     soft validation at process start

Applications that configure logging themselves need nothing from here.
Scripts and the CLI call ``configure_logger`` to get a visible handler.
"""

import logging

LOGGER_NAME = "ulticode.mocks"

__all__ = ["LOGGER_NAME", "configure_logger", "get_logger"]


def get_logger(suffix: str | None = None) -> logging.Logger:
    name = f"{LOGGER_NAME}.{suffix}" if suffix else LOGGER_NAME
    return logging.getLogger(name)


def configure_logger(level: int = logging.WARNING) -> logging.Logger:
    """
    Ensure the mock logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
