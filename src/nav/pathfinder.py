# A* pathfinding over HeightGrid
# src/nav/pathfinder.py
"""
A* pathfinding over HeightGrid.

- Uses Manhattan distance heuristic (admissible + consistent on a
  4-connected unit-cost grid, so a point's first pop is optimal).
- 4-directional neighbors with the climb rule: up at most max_climb units,
  down any amount. Every eligible step costs 1.
- AStar keeps its working tables between runs so repeated searches over
  the same map (the "start from every lowest cell" case) do not reallocate.
- Optional max_expansions guard; hitting it returns "no path", never a
  partial path.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .grid import HeightGrid, Point, can_climb

log = logging.getLogger(__name__)

# (estimated total cost, insertion seq, point)
QueueEntry = Tuple[float, int, Point]

REASON_NO_PATH = "no_path_found"
REASON_EXHAUSTED = "max_expansions_exhausted"


@dataclass
class NodeMeta:
    """Per-search bookkeeping for a point that has been referenced."""

    # The point by which we reached this node. Used for backtracking.
    predecessor: Optional[Point] = None
    # Cost of the current best known path to this node.
    cost: float = float("inf")
    # Whether a frontier entry is pending. A cheaper cost found while pending
    # still pushes a new entry (counted as requeued); the old one goes stale.
    in_queue: bool = False
    # Popped with its optimal cost; never reopened afterwards.
    expanded: bool = False


@dataclass
class SearchStats:
    """Structured summary of the most recent run."""

    expanded: int = 0
    pushed: int = 0
    # pushed == opened + requeued
    opened: int = 0
    requeued: int = 0
    found: bool = False
    reason: str | None = None


def manhattan_distance(a: Point, b: Point) -> int:
    """Manhattan distance heuristic for A*."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def path_length(path: List[Point]) -> int:
    """Number of steps (edges) in a path."""
    return len(path) - 1


class AStar:
    """
    Reusable A* engine.

    Holds the node metadata map, the frontier heap and the path buffer.
    All three are cleared (not reallocated) at the start of each run.

    One instance must not be shared by concurrent searches; grids can be.
    """

    def __init__(
        self,
        *,
        max_climb: int = 1,
        max_expansions: Optional[int] = None,
    ) -> None:
        self.max_climb = max_climb
        self.max_expansions = max_expansions

        self._node_meta: Dict[Point, NodeMeta] = {}
        self._queue: List[QueueEntry] = []
        self._path_out: List[Point] = []
        self._seq = 0
        self._stats = SearchStats()

    @property
    def last_stats(self) -> SearchStats:
        return self._stats

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_path(
        self,
        grid: HeightGrid,
        start: Point,
        goal: Point,
    ) -> Optional[List[Point]]:
        """
        Search for a minimum-step path from start to goal.

        Returns the path from goal back to start, both included, or None
        if goal is unreachable (or max_expansions ran out).

        Raises OutOfBoundsError if start or goal is not a grid cell.
        """
        grid.require_in_bounds(start)
        grid.require_in_bounds(goal)

        self._reset(start, goal)
        stats = self._stats

        while self._queue:
            _, _, current = heapq.heappop(self._queue)
            current_meta = self._node_meta[current]

            # Superseded by a cheaper entry that was already expanded.
            if current_meta.expanded:
                continue

            if current == goal:
                self._backtrack(goal)
                stats.found = True
                log.debug(
                    "A* %s -> %s: %d steps, expanded=%d pushed=%d",
                    start, goal, path_length(self._path_out),
                    stats.expanded, stats.pushed,
                )
                return list(self._path_out)

            if self.max_expansions is not None and stats.expanded >= self.max_expansions:
                stats.reason = REASON_EXHAUSTED
                log.debug(
                    "A* %s -> %s: gave up after %d expansions",
                    start, goal, stats.expanded,
                )
                return None

            current_meta.in_queue = False
            current_meta.expanded = True
            stats.expanded += 1
            self._expand(grid, current, current_meta.cost, goal)

        stats.reason = REASON_NO_PATH
        log.debug(
            "A* %s -> %s: no path, expanded=%d", start, goal, stats.expanded
        )
        return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _reset(self, start: Point, goal: Point) -> None:
        self._node_meta.clear()
        self._queue.clear()
        self._path_out.clear()
        self._seq = 0
        self._stats = SearchStats()

        start_meta = NodeMeta(predecessor=None, cost=0)
        self._node_meta[start] = start_meta
        self._push(start, start_meta, manhattan_distance(start, goal))

    def _push(self, point: Point, meta: NodeMeta, total_cost: float) -> None:
        if meta.in_queue:
            self._stats.requeued += 1
        else:
            self._stats.opened += 1
            meta.in_queue = True

        self._seq += 1
        heapq.heappush(self._queue, (total_cost, self._seq, point))
        self._stats.pushed += 1

    def _expand(
        self,
        grid: HeightGrid,
        current: Point,
        current_cost: float,
        goal: Point,
    ) -> None:
        current_height = grid.height(current)

        for neighbor in grid.neighbors(current):
            if not can_climb(current_height, grid.height(neighbor), self.max_climb):
                continue

            neighbor_meta = self._node_meta.get(neighbor)
            if neighbor_meta is None:
                neighbor_meta = NodeMeta()
                self._node_meta[neighbor] = neighbor_meta
            elif neighbor_meta.expanded:
                continue

            neighbor_cost = current_cost + 1
            if neighbor_cost >= neighbor_meta.cost:
                continue

            neighbor_meta.predecessor = current
            neighbor_meta.cost = neighbor_cost
            # A pending entry carries the old, higher estimate; queue a fresh
            # one and let the stale one be skipped on pop.
            self._push(neighbor, neighbor_meta, neighbor_cost + manhattan_distance(neighbor, goal))

    def _backtrack(self, end: Point) -> None:
        """Fill the path buffer by following predecessors from end."""
        self._path_out.clear()
        current: Optional[Point] = end
        while current is not None:
            self._path_out.append(current)
            current = self._node_meta[current].predecessor


# ---------------------------------------------------------------------------
# Convenience wrappers
# ---------------------------------------------------------------------------


def find_path(
    grid: HeightGrid,
    start: Point,
    goal: Point,
    *,
    max_climb: int = 1,
    max_expansions: Optional[int] = None,
) -> Optional[List[Point]]:
    """One-shot search with a fresh engine. See AStar.find_path."""
    engine = AStar(max_climb=max_climb, max_expansions=max_expansions)
    return engine.find_path(grid, start, goal)


def lowest_points(grid: HeightGrid, height: int = 0) -> List[Point]:
    """
    Every cell at the given height, 0 (letter 'a') by default.

    The absolute height is used, not the grid's minimum: a grid without
    any 0 cells yields an empty list.
    """
    return grid.points_with_height(height)


def find_shortest_from_any(
    grid: HeightGrid,
    candidate_starts: Iterable[Point],
    goal: Point,
    *,
    engine: Optional[AStar] = None,
) -> Optional[int]:
    """
    Minimum path length (in steps) to goal over all candidate starts.

    Starts that cannot reach goal are skipped. Returns None if none can.
    A single engine is reused across all runs.
    """
    engine = engine or AStar()
    best: Optional[int] = None
    tried = 0

    for start in candidate_starts:
        tried += 1
        path = engine.find_path(grid, start, goal)
        if path is None:
            continue
        steps = path_length(path)
        if best is None or steps < best:
            best = steps

    log.info("Shortest path to %s over %d starts: %s", goal, tried, best)
    return best
