"""Stdlib logging setup for route-level loggers.

Domain code reports through logfire; the API routes and scripts log with
plain ``logging`` loggers obtained from :func:`get_logger`.
"""

import logging
import sys

from qna.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("httpx", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once at process start."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("qna").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)
