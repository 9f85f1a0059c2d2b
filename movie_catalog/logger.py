"""
Catalog logging, rendered with the same formatter uvicorn uses for its own lines.
"""

import logging
from logging.config import dictConfig

from movie_catalog.config import LOG_LEVEL

LOGGER_NAME = "movie_catalog"
LOG_FORMAT = "%(levelprefix)s | %(asctime)s | %(name)s | %(message)s"


def create_log_config(log_level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "catalog": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": None,
            },
        },
        "handlers": {
            "catalog": {
                "formatter": "catalog",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["catalog"],
                "level": log_level,
                "propagate": False,
            },
        },
    }


def configure_logging(log_level: str = LOG_LEVEL) -> logging.Logger:
    """Install the catalog handler at `log_level`; safe to call again to change the level."""
    dictConfig(create_log_config(log_level))
    return logging.getLogger(LOGGER_NAME)


logger = configure_logging()
