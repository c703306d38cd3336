"""Logging setup shared by repositories and services."""

from __future__ import annotations

import logging

from .config import get_settings

_ROOT_LOGGER = "catalog"
_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the ``catalog`` namespace.

    The namespace root gets a single stream handler on first use; its level
    comes from LOG_LEVEL.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        level = logging.getLevelName(get_settings().log_level)
        root.setLevel(level if isinstance(level, int) else logging.INFO)
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
