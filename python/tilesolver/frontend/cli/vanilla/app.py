"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution path as plain blocks of integers, one block per
grid, followed by the node counters, in the layout of the console
program the solver started as.
"""

from __future__ import annotations

from tilesolver.models.grid import Grid
from tilesolver.models.result import SearchResult

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_R = "\033[0m"       # reset


def _render_grid(grid: Grid) -> str:
    width = len(str(grid.size * grid.size - 1))
    return "\n".join(
        " ".join(f"{v:>{width}}" for v in row) for row in grid.rows
    )


# -- public entry point -------------------------------------------------------


def show_result(result: SearchResult) -> None:
    """Print *result* to stdout."""
    if result.solved:
        print(f"{_C}*****************Best Path*****************{_R}")
        moves = result.moves
        for i, grid in enumerate(result.path):
            print(_render_grid(grid))
            if i < len(moves):
                print(f"  ({moves[i].value})")
            print()
        print(f"Solved in {_G}{result.cost}{_R} moves.")
    else:
        print(f"{_RED}No solution: the goal is unreachable from the start state.{_R}")

    print(f"Number of nodes generated: {_Y}{result.nodes_generated}{_R}")
    print(f"Number of nodes expanded: {_Y}{result.nodes_expanded}{_R}")
    print(f"Time taken: {result.elapsed * 1000:.2f} ms ({result.heuristic})")
