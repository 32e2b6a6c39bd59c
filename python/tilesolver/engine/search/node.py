"""Search tree node."""

from __future__ import annotations

from dataclasses import dataclass

from tilesolver.errors import SearchInvariantError
from tilesolver.models.grid import Grid


@dataclass(eq=False)
class SearchNode:
    """A grid reached along one particular path.

    ``f`` is derived from ``g`` and ``h`` on every access, so it can
    never drift out of step with them. ``parent`` is a plain object
    reference; a parent stays alive for as long as any descendant does,
    regardless of what happens to the fringe or closed set.
    """

    grid: Grid
    g: int
    h: int
    parent: SearchNode | None = None

    def __post_init__(self) -> None:
        if self.g < 0 or self.h < 0:
            raise SearchInvariantError(
                f"negative cost on node (g={self.g}, h={self.h})"
            )

    @property
    def f(self) -> int:
        return self.g + self.h

    def child(self, grid: Grid, h: int) -> SearchNode:
        """Node for *grid* one slide further along this node's path."""
        return SearchNode(grid=grid, g=self.g + 1, h=h, parent=self)
