# letter grid -> HeightMap
# src/heightmap/parser.py
"""
Parse the puzzle's textual height map.

Format: one row per line, each cell a letter.
- 'a'..'z' are heights 0..25
- 'S' marks the start and has the height of 'a'
- 'E' marks the goal and has the height of 'z'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from nav import HeightGrid, MalformedGridError, Point

log = logging.getLogger(__name__)

START_MARK = "S"
GOAL_MARK = "E"


class HeightMapParseError(ValueError):
    """Raised when the text cannot be turned into a HeightMap."""


@dataclass(frozen=True)
class HeightMap:
    grid: HeightGrid
    start: Point
    goal: Point


def _letter_height(letter: str) -> int:
    return ord(letter) - ord("a")


def parse_height_map(text: str) -> HeightMap:
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise HeightMapParseError("Height map is empty")

    start: Optional[Point] = None
    goal: Optional[Point] = None
    heights: List[List[int]] = []

    for row, line in enumerate(lines):
        row_heights: List[int] = []
        for col, char in enumerate(line):
            point = (row, col)
            if "a" <= char <= "z":
                letter = char
            elif char == START_MARK:
                if start is not None:
                    raise HeightMapParseError(
                        f"Duplicate start at {point}, first at {start}"
                    )
                start = point
                letter = "a"
            elif char == GOAL_MARK:
                if goal is not None:
                    raise HeightMapParseError(
                        f"Duplicate goal at {point}, first at {goal}"
                    )
                goal = point
                letter = "z"
            else:
                raise HeightMapParseError(f"Unknown map character {char!r} at {point}")
            row_heights.append(_letter_height(letter))
        heights.append(row_heights)

    if start is None:
        raise HeightMapParseError("No start point found")
    if goal is None:
        raise HeightMapParseError("No goal point found")

    try:
        grid = HeightGrid(heights)
    except MalformedGridError as exc:
        raise HeightMapParseError(str(exc)) from exc

    log.debug("Parsed %dx%d height map, start=%s goal=%s", grid.rows, grid.cols, start, goal)
    return HeightMap(grid=grid, start=start, goal=goal)


def load_height_map(path: Path | str) -> HeightMap:
    """Read and parse a height map file."""
    path = Path(path)
    log.info("Loading height map from %s", path)
    with path.open("r", encoding="utf-8") as f:
        return parse_height_map(f.read())
