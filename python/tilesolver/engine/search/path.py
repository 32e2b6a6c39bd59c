from __future__ import annotations

from tilesolver.engine.search.node import SearchNode
from tilesolver.models.grid import Grid


def reconstruct_path(node: SearchNode) -> list[Grid]:
    """Follow parent links from *node* back to the start; start first."""
    path: list[Grid] = []
    cur: SearchNode | None = node
    while cur is not None:
        path.append(cur.grid)
        cur = cur.parent
    path.reverse()
    return path
