"""termpalette logging configuration.

Logs go to `TERMPALETTE_LOG_FILE` when set, since curses owns the terminal
while colors are in use; otherwise to stderr.
Level comes from `TERMPALETTE_LOG_LEVEL` (default: WARNING).
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure termpalette logging.

    Args:
        level: Optional override for `TERMPALETTE_LOG_LEVEL`.
    """
    if level:
        os.environ["TERMPALETTE_LOG_LEVEL"] = level

    level_name = os.environ.get("TERMPALETTE_LOG_LEVEL", "WARNING").upper()
    log_file = os.environ.get("TERMPALETTE_LOG_FILE")
    handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8") if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("termpalette")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.propagate = False
