# src/heightmap/__init__.py
"""
Height map input.

Usage:
    from heightmap import load_height_map

    hm = load_height_map("input.txt")
    hm.grid, hm.start, hm.goal
"""

from __future__ import annotations

from .parser import HeightMap, HeightMapParseError, load_height_map, parse_height_map

__all__ = [
    "HeightMap",
    "HeightMapParseError",
    "load_height_map",
    "parse_height_map",
]
