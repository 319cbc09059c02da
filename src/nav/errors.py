# domain errors for the navigation core
# src/nav/errors.py
"""
Error taxonomy for nav.

Only contract violations are errors here:
- MalformedGridError: the height grid itself is broken (raised at construction).
- OutOfBoundsError: a start/goal coordinate is outside the grid.

An unreachable goal is NOT an error; the search returns None for it.
"""

from __future__ import annotations


class NavError(Exception):
    """Base class for navigation contract violations."""


class MalformedGridError(NavError, ValueError):
    """Grid is empty, non-rectangular, or holds invalid heights."""


class OutOfBoundsError(NavError, IndexError):
    """A coordinate passed to the search lies outside the grid."""

    def __init__(self, point: object, shape: tuple[int, int]) -> None:
        self.point = point
        self.shape = shape
        super().__init__(f"Point {point!r} is outside grid of shape {shape}")
