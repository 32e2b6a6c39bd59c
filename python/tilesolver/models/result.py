"""Outcome of a single search run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from tilesolver.errors import SearchInvariantError
from tilesolver.models.grid import Direction, Grid


class SearchStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class SearchResult:
    """Path and counters reported by the search driver.

    ``path`` runs from start to goal inclusive and is empty when the
    instance is unsolvable. ``nodes_expanded`` is the size of the closed
    set when the run ended.
    """

    status: SearchStatus
    nodes_generated: int
    nodes_expanded: int
    heuristic: str
    path: list[Grid] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def cost(self) -> int | None:
        """Number of slides in the path, or ``None`` if unsolved."""
        return len(self.path) - 1 if self.path else None

    @property
    def moves(self) -> list[Direction]:
        """Tile directions replaying the path, one per slide."""
        moves: list[Direction] = []
        for before, after in zip(self.path, self.path[1:]):
            direction = Direction.between(before, after)
            if direction is None:
                raise SearchInvariantError(
                    f"path is not contiguous at step {len(moves) + 1}"
                )
            moves.append(direction)
        return moves
