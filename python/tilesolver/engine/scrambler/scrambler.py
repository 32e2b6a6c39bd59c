"""Random solvable start grids and the parity test for solvability."""

from __future__ import annotations

import random

from tilesolver.engine.successor import neighbours
from tilesolver.errors import InvalidGridError
from tilesolver.models.grid import Grid


def is_solvable(start: Grid, goal: Grid) -> bool:
    """Return True if *goal* is reachable from *start*.

    Every slide is one transposition (blank with a neighbour) and moves
    the blank by one cell. So the permutation taking start to goal, blank
    included, must have the same parity as the blank's Manhattan
    displacement. This holds for any grid size.
    """
    if start.size != goal.size:
        raise InvalidGridError(
            f"Cannot compare a {start.size}×{start.size} grid with a "
            f"{goal.size}×{goal.size} one."
        )
    n = start.size
    where = {v: i for i, v in enumerate(goal.cells)}
    perm = [where[v] for v in start.cells]

    # parity = (length - number of cycles) mod 2
    seen = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if seen[i]:
            continue
        cycles += 1
        j = i
        while not seen[j]:
            seen[j] = True
            j = perm[j]
    perm_parity = (len(perm) - cycles) % 2

    sr, sc = divmod(start.blank_index, n)
    gr, gc = divmod(goal.blank_index, n)
    return perm_parity == (abs(sr - gr) + abs(sc - gc)) % 2


def scramble(goal: Grid, moves: int, rng: random.Random | None = None) -> Grid:
    """Walk the blank *moves* random slides away from *goal*.

    The walk never immediately undoes its previous slide, so short
    scrambles do not collapse back onto the goal as often. The result is
    always solvable, but it may sit closer than *moves* slides to the
    goal.
    """
    if moves < 0:
        raise ValueError(f"moves must be non-negative, got {moves}")
    rng = rng or random.Random()
    grid = goal
    prev: Grid | None = None
    for _ in range(moves):
        options = neighbours(grid)
        if prev in options and len(options) > 1:
            options.remove(prev)
        prev, grid = grid, rng.choice(options)
    return grid
