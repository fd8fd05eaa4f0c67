"""Logging configuration for the API process."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Calling it again only adjusts the level, so building several
    applications in one process (tests) does not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(handler, "_taskboard", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._taskboard = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # echo=True attaches its own handler to this logger
    logging.getLogger("sqlalchemy.engine").propagate = False
