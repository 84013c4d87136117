"""Logging setup for the ``notepub`` logger tree.

Callers wire it from the loaded configuration::

    config = load_config(Path("notepub.toml"))
    setup_logging(config.log_level)
    notes = load_public_notes(config)
    home = home_slug(notes, config.home_note_slug)
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("notepub")
    logger.setLevel(_parse_log_level(level))
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def _parse_log_level(level: str) -> int:
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO
