"""Generates the grids one slide away from a given grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tilesolver.models.grid import Grid

if TYPE_CHECKING:
    from tilesolver.engine.search.context import SearchContext
    from tilesolver.engine.search.node import SearchNode


# Blank offsets in generation order: up, down, left, right.
# The order only decides ties between equal-f children.
BLANK_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbours(grid: Grid) -> list[Grid]:
    """Every grid reachable from *grid* by one slide, in generation order."""
    n = grid.size
    bi = grid.blank_index
    br, bc = divmod(bi, n)
    out: list[Grid] = []
    for dr, dc in BLANK_OFFSETS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < n and 0 <= nc < n:
            out.append(_swap(grid, bi, nr * n + nc))
    return out


def expand(
    node: SearchNode,
    context: SearchContext,
    evaluate: Callable[[Grid], int],
    check_fringe_duplicates: bool = False,
) -> int:
    """Push the unexplored successors of *node* onto the fringe.

    Every candidate counts towards ``context.nodes_generated``, kept or
    not. A candidate is dropped when its grid has already been expanded,
    and, with *check_fringe_duplicates*, when it is already pending in
    the fringe. Returns the number of children pushed.
    """
    pushed = 0
    for grid in neighbours(node.grid):
        context.nodes_generated += 1
        if grid in context.closed:
            continue
        if check_fringe_duplicates and grid in context.fringe:
            continue
        context.fringe.push(node.child(grid, evaluate(grid)))
        pushed += 1
    return pushed


# -- helpers ------------------------------------------------------------------


def _swap(grid: Grid, blank: int, target: int) -> Grid:
    cells = list(grid.cells)
    cells[blank], cells[target] = cells[target], cells[blank]
    return Grid(size=grid.size, cells=tuple(cells))
