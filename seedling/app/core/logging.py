"""Loguru sink setup for the API process."""
from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO", *, serialize: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink.

    serialize=True emits one JSON object per record, bound fields included under
    record.extra.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), serialize=serialize, backtrace=False)
