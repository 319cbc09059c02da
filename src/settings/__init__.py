# src/settings/__init__.py
"""YAML-backed settings for the search engine and logging."""

from __future__ import annotations

from .loader import (
    DEFAULT_SETTINGS_PATH,
    LoggingConfig,
    NavSettings,
    SearchConfig,
    load_settings,
)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "LoggingConfig",
    "NavSettings",
    "SearchConfig",
    "load_settings",
]
