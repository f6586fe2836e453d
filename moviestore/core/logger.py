# moviestore/core/logger.py

import sys
import logging
from typing import Union


class CategoryFormatter(logging.Formatter):
    """Tag each line with the module it came from, e.g. ``[MOVIES]``."""

    def format(self, record):
        if not hasattr(record, "category"):
            record.category = record.name.rsplit(".", 1)[-1].upper()
        return super().format(record)


formatter = CategoryFormatter(
    fmt="%(asctime)s %(levelname)-8s [%(category)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``"debug"``, ``"INFO"`` or a numeric level; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.hasHandlers():
        return logger

    # one stdout handler per app logger, root stays untouched
    logger.propagate = False
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
