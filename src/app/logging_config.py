# stdout logging setup for entrypoints
# src/app/logging_config.py
"""
Central logging configuration for hill-climb navigation.

Entrypoints call configure_logging() once, typically with the level from
settings (config/search.yaml):

    settings = load_settings()
    configure_logging(settings.logging.level)

Search diagnostics (nav.pathfinder) are emitted at DEBUG, progress lines
(height map loading, batch results) at INFO.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Attach a single stream handler to the root logger.

    If handlers already exist (pytest, an embedding app), they are left
    alone and only the level is applied.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    if root.handlers:
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
