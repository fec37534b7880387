import logging
import logging.config
from typing import Optional

from src.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

def build_logging_config(level: str) -> dict:
    """dictConfig for the application loggers.

    Application modules log under `src`; SQLAlchemy statement echo only
    shows up when the application itself runs at DEBUG.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
            },
        },
        "loggers": {
            "src": {"handlers": ["stdout"], "level": level, "propagate": False},
            "sqlalchemy.engine": {"level": "INFO" if level == "DEBUG" else "WARNING"},
        },
        "root": {"handlers": ["stdout"], "level": "WARNING"},
    }

def setup_logging(level: Optional[str] = None):
    """Configure logging from LOG_LEVEL unless a level is given"""
    logging.config.dictConfig(build_logging_config(level or settings.LOG_LEVEL))
