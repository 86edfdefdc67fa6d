from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(levelname)s] [%(name)s] %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Send the package's log records to stderr, leaving stdout for results."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("diecodes")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
