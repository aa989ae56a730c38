"""
Logging configuration for the application.

Two loggers matter to the service: the root logger, which receives
the service and error events, and ``taskboard_api.access``, which
receives one line per HTTP request from ``AccessLogMiddleware``.
``setup_logging`` attaches handlers to the root logger once and sets
the access logger's level on every call, so each application can
silence or enable its request log independently of the event log.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER_NAME = "taskboard_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else default


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    access_level: str = "INFO",
) -> None:
    """Configure the event and access loggers.

    Parameters
    ----------
    level : str
        Level name for the root logger.  Unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
        Resolved relative to the current working directory.
    access_level : str
        Level name for the access logger; ``WARNING`` or above turns
        the per-request lines off.
    """
    logging.getLogger(ACCESS_LOGGER_NAME).setLevel(parse_level(access_level))

    root = logging.getLogger()
    if root.handlers:
        # Handlers are already installed, e.g. by a test runner or a
        # previous ``create_app`` call.
        return
    root.setLevel(parse_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
