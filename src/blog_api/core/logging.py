"""
Logging Configuration

Console logging shared by the API process and ``scripts/seed_posts.py``.
"""

import sys
from logging.config import dictConfig

from blog_api.core.config import settings

# Third-party loggers that drown out request handling below these levels
QUIET_LOGGERS = {
    "sqlalchemy.engine": "WARNING",
    "aiosqlite": "WARNING",
    "faker": "WARNING",
}


def setup_logging(level: str | None = None) -> None:
    """
    Initialize logging for ``blog_api`` and the libraries it drives.

    Args:
        level: Overrides LOG_LEVEL (the seed script passes its own).

    Per-request access lines from uvicorn are only emitted at DEBUG;
    the posts router already logs every mutation it performs.
    """
    log_level = (level or settings.LOG_LEVEL).upper()
    access_level = "INFO" if log_level == "DEBUG" else "WARNING"

    def _console(logger_level: str) -> dict:
        return {"level": logger_level, "handlers": ["console"], "propagate": False}

    loggers = {
        "blog_api": _console(log_level),
        "uvicorn": _console("INFO"),
        "uvicorn.access": _console(access_level),
    }
    loggers.update({name: _console(lvl) for name, lvl in QUIET_LOGGERS.items()})

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stdout,
                    "formatter": "default",
                },
            },
            "root": {"level": log_level, "handlers": ["console"]},
            "loggers": loggers,
        }
    )
