"""Open set (fringe) with a deterministic minimum-``f`` selection."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter

from tilesolver.engine.search.node import SearchNode
from tilesolver.models.grid import Grid


class Fringe:
    """Multiset of nodes waiting to be expanded.

    :meth:`select` yields the node with the smallest ``f``, and among
    equal ``f`` the one pushed first. That is the node a front-to-back
    scan would keep if it only replaced its tentative best on a strictly
    smaller ``f``.

    Entries are ordered in a heap on ``(f, insertion number)``.
    :meth:`retire` drops every pending instance of a grid at once; the
    heap entries themselves are discarded lazily when they surface.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, SearchNode]] = []
        self._seq = itertools.count()
        self._pending: Counter[Grid] = Counter()
        # Bumped on retire; heap entries from an older generation are stale.
        self._generation: dict[Grid, int] = {}
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, grid: Grid) -> bool:
        return self.contains(grid)

    def push(self, node: SearchNode) -> None:
        gen = self._generation.get(node.grid, 0)
        heapq.heappush(self._heap, (node.f, next(self._seq), gen, node))
        self._pending[node.grid] += 1
        self._size += 1

    def select(self) -> SearchNode | None:
        """Remove and return the best pending node, or ``None`` if empty."""
        heap = self._heap
        while heap:
            _, _, gen, node = heapq.heappop(heap)
            grid = node.grid
            if gen != self._generation.get(grid, 0):
                continue
            count = self._pending[grid]
            if count == 1:
                del self._pending[grid]
            else:
                self._pending[grid] = count - 1
            self._size -= 1
            return node
        return None

    def retire(self, grid: Grid) -> int:
        """Drop every pending instance of *grid*; return how many there were."""
        count = self._pending.pop(grid, 0)
        if count:
            self._generation[grid] = self._generation.get(grid, 0) + 1
            self._size -= count
        return count

    def contains(self, grid: Grid) -> bool:
        return grid in self._pending
