"""Process-wide logging setup."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger (once) and set its level."""
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
