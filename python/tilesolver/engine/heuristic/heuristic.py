"""Heuristic estimates of the remaining cost to the goal."""

from __future__ import annotations

from enum import StrEnum

from tilesolver.errors import InvalidGridError, SearchInvariantError
from tilesolver.models.grid import Grid


class HeuristicKind(StrEnum):
    MISPLACED = "misplaced"
    MANHATTAN = "manhattan"


class HeuristicEvaluator:
    """Scores grids against one fixed goal.

    The goal's tile positions are computed once so that scoring a
    successor only walks its own cells. With ``count_blank`` (the
    default) the blank takes part in the sum like any other tile;
    without it both strategies are admissible and consistent.
    """

    def __init__(
        self,
        kind: HeuristicKind,
        goal: Grid,
        count_blank: bool = True,
    ) -> None:
        self.kind = HeuristicKind(kind)
        self.goal = goal
        self.count_blank = count_blank
        n = goal.size
        # goal_pos[value] = (row, col) of that value in the goal
        self._goal_pos: list[tuple[int, int]] = [(0, 0)] * (n * n)
        for i, v in enumerate(goal.cells):
            self._goal_pos[v] = divmod(i, n)

    def __call__(self, grid: Grid) -> int:
        if grid.size != self.goal.size:
            raise InvalidGridError(
                f"Cannot score a {grid.size}×{grid.size} grid against a "
                f"{self.goal.size}×{self.goal.size} goal."
            )
        if self.kind is HeuristicKind.MISPLACED:
            h = self._misplaced(grid)
        else:
            h = self._manhattan(grid)
        if h < 0:
            raise SearchInvariantError(f"{self.kind} heuristic returned {h}")
        return h

    @property
    def max_value(self) -> int:
        """Upper bound of this evaluator over every grid of the goal's size."""
        n = self.goal.size
        if self.kind is HeuristicKind.MISPLACED:
            return n * n if self.count_blank else n * n - 1
        total = 0
        for value, (gr, gc) in enumerate(self._goal_pos):
            if value == 0 and not self.count_blank:
                continue
            total += max(gr, n - 1 - gr) + max(gc, n - 1 - gc)
        return total

    # -- strategies -----------------------------------------------------------

    def _misplaced(self, grid: Grid) -> int:
        h = 0
        for v, w in zip(grid.cells, self.goal.cells):
            if v != w and (self.count_blank or v != 0):
                h += 1
        return h

    def _manhattan(self, grid: Grid) -> int:
        n = grid.size
        goal_pos = self._goal_pos
        h = 0
        for i, v in enumerate(grid.cells):
            if v == 0 and not self.count_blank:
                continue
            r, c = divmod(i, n)
            gr, gc = goal_pos[v]
            h += abs(r - gr) + abs(c - gc)
        return h


def heuristic(
    grid: Grid,
    goal: Grid,
    kind: HeuristicKind = HeuristicKind.MISPLACED,
    count_blank: bool = True,
) -> int:
    """One-off heuristic value of *grid* relative to *goal*."""
    return HeuristicEvaluator(kind, goal, count_blank)(grid)
