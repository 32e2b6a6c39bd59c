"""Mutable state owned by one search run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from tilesolver.engine.search.fringe import Fringe
from tilesolver.models.grid import Grid


class SearchPhase(StrEnum):
    INIT = "init"
    SELECT = "select"
    GOAL_CHECK = "goal_check"
    EXPAND = "expand"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SearchContext:
    """Fringe, closed set and counters of a single run.

    A fresh context is built for every run, so independent searches
    never share anything.
    """

    fringe: Fringe = field(default_factory=Fringe)
    closed: set[Grid] = field(default_factory=set)
    nodes_generated: int = 0
    phase: SearchPhase = SearchPhase.INIT

    @property
    def nodes_expanded(self) -> int:
        return len(self.closed)
