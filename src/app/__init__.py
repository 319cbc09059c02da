# src/app/__init__.py
"""
Application wiring for hill-climb navigation.

Exposes:
- configure_logging: one-time stdout logging setup for entrypoints
"""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
