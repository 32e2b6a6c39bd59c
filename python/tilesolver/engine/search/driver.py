"""A* search driver.

One run walks the phases ``INIT → SELECT → GOAL_CHECK → EXPAND → SELECT
…`` until it either reaches the goal (``DONE``) or runs out of fringe
(``FAILED``). Running out of fringe is the only way an unsolvable
instance is detected; no parity shortcut is taken here.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Union

from tilesolver.config import SearchConfig
from tilesolver.engine.heuristic import HeuristicEvaluator
from tilesolver.engine.search.context import SearchContext, SearchPhase
from tilesolver.engine.search.node import SearchNode
from tilesolver.engine.search.path import reconstruct_path
from tilesolver.engine.successor import expand
from tilesolver.errors import InvalidGridError
from tilesolver.models.grid import Grid
from tilesolver.models.result import SearchResult, SearchStatus

logger = logging.getLogger(__name__)

GridLike = Union[Grid, Sequence[int], Sequence[Sequence[int]]]


class AStarSearch:
    """Best-first search over grids, ordered by ``f = g + h``."""

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()
        self.context: SearchContext | None = None

    def run(self, start: GridLike, goal: GridLike) -> SearchResult:
        """Search from *start* to *goal*.

        Raises :class:`InvalidGridError` before searching if either grid
        is malformed. An unsolvable instance is reported through the
        result status, not raised.
        """
        cfg = self.config
        start = as_grid(start, cfg.size, "start")
        goal = as_grid(goal, cfg.size, "goal")

        started = time.perf_counter()
        evaluate = HeuristicEvaluator(cfg.heuristic, goal, cfg.count_blank)
        ctx = self.context = SearchContext()
        debug = logger.isEnabledFor(logging.DEBUG)

        # -- INIT ---------------------------------------------------------------
        ctx.fringe.push(SearchNode(grid=start, g=0, h=evaluate(start)))
        logger.info(
            "A* search started (heuristic=%s, count_blank=%s, strict_fringe=%s)",
            cfg.heuristic, cfg.count_blank, cfg.check_fringe_duplicates,
        )

        while True:
            ctx.phase = SearchPhase.SELECT
            current = ctx.fringe.select()
            if current is None:
                ctx.phase = SearchPhase.FAILED
                logger.info(
                    "Fringe exhausted after %d expansions; no solution",
                    ctx.nodes_expanded,
                )
                return self._result(ctx, SearchStatus.UNSOLVABLE, [], started)

            ctx.phase = SearchPhase.GOAL_CHECK
            if current.grid == goal:
                ctx.phase = SearchPhase.DONE
                path = reconstruct_path(current)
                logger.info(
                    "Goal reached at depth %d (%d generated, %d expanded)",
                    current.g, ctx.nodes_generated, ctx.nodes_expanded,
                )
                return self._result(ctx, SearchStatus.SOLVED, path, started)

            ctx.phase = SearchPhase.EXPAND
            ctx.closed.add(current.grid)
            ctx.fringe.retire(current.grid)
            pushed = expand(current, ctx, evaluate, cfg.check_fringe_duplicates)
            if debug:
                logger.debug(
                    "expanded g=%d h=%d f=%d, pushed %d, fringe=%d closed=%d",
                    current.g, current.h, current.f, pushed,
                    len(ctx.fringe), len(ctx.closed),
                )

    def _result(
        self,
        ctx: SearchContext,
        status: SearchStatus,
        path: list[Grid],
        started: float,
    ) -> SearchResult:
        return SearchResult(
            status=status,
            nodes_generated=ctx.nodes_generated,
            nodes_expanded=ctx.nodes_expanded,
            heuristic=str(self.config.heuristic),
            path=path,
            elapsed=time.perf_counter() - started,
        )


def solve(
    start: GridLike,
    goal: GridLike,
    config: SearchConfig | None = None,
) -> SearchResult:
    """Run one A* search with a fresh context."""
    return AStarSearch(config).run(start, goal)


def as_grid(value: GridLike, size: int, label: str = "grid") -> Grid:
    """Accept a :class:`Grid`, a flat list or a list of rows."""
    try:
        if isinstance(value, Grid):
            # the bare constructor skips validation
            grid = Grid.from_flat(value.cells, size=value.size)
        else:
            items = list(value)
            if items and all(isinstance(v, Sequence) for v in items):
                grid = Grid.from_rows(items)
            else:
                grid = Grid.from_flat(items, size=size)
    except InvalidGridError as exc:
        raise InvalidGridError(f"Invalid {label}: {exc}") from exc
    if grid.size != size:
        raise InvalidGridError(
            f"Invalid {label}: expected a {size}×{size} grid, got "
            f"{grid.size}×{grid.size}."
        )
    return grid
