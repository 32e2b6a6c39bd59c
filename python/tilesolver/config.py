"""Per-run search configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tilesolver.engine.heuristic import HeuristicKind
from tilesolver.models.grid import DEFAULT_SIZE


@dataclass(frozen=True)
class SearchConfig:
    """Options fixed for the whole of one search run.

    ``heuristic``
        Strategy used to score every node. Misplaced tiles is the
        default, as in the console program this solver grew out of.
    ``count_blank``
        Include the blank in the heuristic sum.
    ``check_fringe_duplicates``
        Also drop successors whose grid is already waiting in the
        fringe. Off by default: only expanded grids are filtered, so
        duplicates may sit in the fringe side by side. Turning it on can
        change which of several equal-cost paths is returned.
    ``size``
        Grid side length expected for start and goal.
    """

    heuristic: HeuristicKind = HeuristicKind.MISPLACED
    count_blank: bool = True
    check_fringe_duplicates: bool = False
    size: int = DEFAULT_SIZE
