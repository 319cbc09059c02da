# height grid + 4-neighborhood topology
# src/nav/grid.py
"""
HeightGrid: immutable height map abstraction for pathfinding.

This module does not know about letters, files, or puzzle rules beyond
the climb rule. It only:
- Validates and stores a rectangular grid of heights.
- Exposes bounds checks and 4-directional neighbor enumeration.

Parsing a textual map into a HeightGrid belongs to heightmap.parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import MalformedGridError, OutOfBoundsError

# (row, col) zero-based coordinates
Point = Tuple[int, int]

# Offsets in (row, col): up, right, down, left.
_FOUR_DIRECTIONS: Tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def four_neighbors(point: Point, rows: int, cols: int) -> Iterator[Point]:
    """
    Lazily yield the in-bounds orthogonal neighbors of point.

    Order is up, right, down, left. Candidates outside [0, rows) x [0, cols)
    are skipped, never wrapped or clamped, so a 1x1 grid yields nothing.
    """
    r, c = point
    for dr, dc in _FOUR_DIRECTIONS:
        nr = r + dr
        nc = c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield (nr, nc)


def can_climb(from_height: int, to_height: int, max_climb: int = 1) -> bool:
    """Climb rule: go up at most max_climb units, go down any amount."""
    return to_height <= from_height + max_climb


@dataclass(frozen=True)
class HeightGrid:
    """
    Rectangular grid of non-negative integer heights.

    Indexed by (row, col). The grid must not change while a search runs;
    the dataclass is frozen and callers should not mutate `heights` rows.
    """

    heights: List[List[int]]

    def __post_init__(self) -> None:
        if not self.heights:
            raise MalformedGridError("Height grid has no rows")

        width = len(self.heights[0])
        if width == 0:
            raise MalformedGridError("Height grid has no columns")

        for row_idx, row in enumerate(self.heights):
            if len(row) != width:
                raise MalformedGridError(
                    f"Row {row_idx} has {len(row)} cells, expected {width}"
                )
            for col_idx, value in enumerate(row):
                # bool is an int subclass but never a height
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise MalformedGridError(
                        f"Invalid height {value!r} at ({row_idx}, {col_idx})"
                    )

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.heights)

    @property
    def cols(self) -> int:
        return len(self.heights[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, point: Point) -> bool:
        r, c = point
        return 0 <= r < self.rows and 0 <= c < self.cols

    def require_in_bounds(self, point: Point) -> None:
        """Raise OutOfBoundsError if point is not a valid cell."""
        if not self.in_bounds(point):
            raise OutOfBoundsError(point, self.shape)

    def height(self, point: Point) -> int:
        r, c = point
        return self.heights[r][c]

    def neighbors(self, point: Point) -> Iterator[Point]:
        """4-directional neighbors of point inside this grid."""
        return four_neighbors(point, self.rows, self.cols)

    def points(self) -> Iterator[Point]:
        """All cells in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def points_with_height(self, value: int) -> List[Point]:
        return [p for p in self.points() if self.height(p) == value]
