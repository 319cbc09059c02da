# src/nav/__init__.py
"""
Navigation core for height-map terrain.

Provides:
- HeightGrid: validated, immutable grid of heights
- four_neighbors / can_climb: topology and the climb rule
- AStar: reusable A* engine (find_path)
- find_path / find_shortest_from_any: one-shot and batch helpers
"""

from __future__ import annotations

from .errors import MalformedGridError, NavError, OutOfBoundsError
from .grid import HeightGrid, Point, can_climb, four_neighbors
from .pathfinder import (
    AStar,
    NodeMeta,
    SearchStats,
    find_path,
    find_shortest_from_any,
    lowest_points,
    manhattan_distance,
    path_length,
)

__all__ = [
    "AStar",
    "HeightGrid",
    "MalformedGridError",
    "NavError",
    "NodeMeta",
    "OutOfBoundsError",
    "Point",
    "SearchStats",
    "can_climb",
    "find_path",
    "find_shortest_from_any",
    "four_neighbors",
    "lowest_points",
    "manhattan_distance",
    "path_length",
]
