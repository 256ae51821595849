"""Logging setup for processes embedding the block store"""

from __future__ import annotations

import logging

from blockstore.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT, force=True)
