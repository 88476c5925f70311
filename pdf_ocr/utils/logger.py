"""Logging configuration shared by the CLI and the API server.

Pipeline modules log through ``get_logger(__name__)``. Only entry points
call :func:`setup_logging`, which attaches one handler to the root logger
and keeps chatty HTTP client libraries at WARNING unless debugging.
"""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that emit a record per HTTP request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "multipart")


def setup_logging(
    level: str = "INFO",
    stream: TextIO | None = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger.

    When the root logger already has handlers, for example under a test
    runner or an embedding application, they are left alone and only the
    levels are updated.

    Args:
        level: Level name such as DEBUG or WARNING. Unknown names mean INFO.
        stream: Destination of log records. Defaults to stdout.
        quiet: Logger names held at WARNING unless ``level`` is DEBUG.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(numeric_level)

    quiet_level = (
        numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    )
    for name in quiet:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
