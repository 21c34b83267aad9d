"""Logging helpers producing uvicorn-styled application logs."""

import logging

from uvicorn.logging import DefaultFormatter

FORMAT = "%(levelprefix)s %(asctime)s [%(threadName)s] [%(name)s] %(message)s"

# Parents of every logger the application creates.
APP_LOGGERS = ("price_search", "catalog", "images", "build_assistant", "app")


def get_logger(name: str = __name__, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = DefaultFormatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_logging(level: int = logging.INFO) -> None:
    """Attach the uvicorn-styled handler to every application logger."""
    for name in APP_LOGGERS:
        get_logger(name, level)
