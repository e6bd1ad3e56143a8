from __future__ import annotations

import logging
import sys

from .settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    logger = logging.getLogger()
    if logger.handlers:  # already configured (pytest, embedding apps)
        return
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # stdout carries the record stream
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
