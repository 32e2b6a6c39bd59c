#!/usr/bin/env python3
"""8-puzzle A* solver.

Usage::

    tilesolver                                   # prompts for start and goal
    tilesolver -s "1 2 3 4 0 6 7 5 8" -g 123456780
    tilesolver -s 123406758 -g 123456780 -H manhattan -f rich
    tilesolver -g 123456780 --scramble 20 --seed 7
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from typing import Optional

import typer

from tilesolver.config import SearchConfig
from tilesolver.engine.heuristic import HeuristicKind
from tilesolver.engine.scrambler import is_solvable, scramble
from tilesolver.engine.search import solve
from tilesolver.errors import InvalidGridError
from tilesolver.frontend.cli.input_parser import parse_grid, read_grid
from tilesolver.log import configure_logging
from tilesolver.models.grid import Grid
from tilesolver.models.result import SearchResult, SearchStatus

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "tilesolver.frontend.cli.vanilla.app",
    Frontend.rich: "tilesolver.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _grid_option(text: Optional[str], label: str, option: str) -> Grid:
    """Parse *text*, or prompt for the grid when the option was omitted."""
    try:
        if text is None:
            return read_grid(label)
        return parse_grid(text)
    except InvalidGridError as exc:
        raise typer.BadParameter(str(exc), param_hint=f"'{option}'") from exc


def _show(frontend: Frontend, result: SearchResult) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_result(result)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: Optional[str] = typer.Option(
        None, "-s", "--start",
        help="Start grid, 9 numbers row-major (0 = blank). Prompted if omitted.",
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal grid, 9 numbers row-major (0 = blank). Prompted if omitted.",
    ),
    heuristic: HeuristicKind = typer.Option(
        HeuristicKind.MISPLACED, "-H", "--heuristic",
        envvar="TILESOLVER_HEURISTIC",
        case_sensitive=False,
        help="Heuristic used for the whole run.",
    ),
    exclude_blank: bool = typer.Option(
        False, "--exclude-blank",
        envvar="TILESOLVER_EXCLUDE_BLANK",
        help="Leave the blank out of the heuristic sum.",
    ),
    strict_fringe: bool = typer.Option(
        False, "--strict-fringe",
        envvar="TILESOLVER_STRICT_FRINGE",
        help="Also drop successors already waiting in the fringe.",
    ),
    precheck: bool = typer.Option(
        False, "--precheck",
        help="Reject parity-mismatched instances without searching.",
    ),
    scramble_moves: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Ignore --start and scramble the goal by this many random slides.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log search progress (-v info, -vv debug).",
    ),
) -> None:
    """Solve an 8-puzzle instance with A* search."""
    configure_logging(verbose)

    if scramble_moves is not None:
        goal_grid = _grid_option(goal, "goal", "--goal")
        start_grid = scramble(goal_grid, scramble_moves, random.Random(seed))
        logger.info("Scrambled start (%d slides):\n%s", scramble_moves, start_grid)
    else:
        start_grid = _grid_option(start, "initial", "--start")
        goal_grid = _grid_option(goal, "goal", "--goal")

    config = SearchConfig(
        heuristic=heuristic,
        count_blank=not exclude_blank,
        check_fringe_duplicates=strict_fringe,
    )

    if precheck and not is_solvable(start_grid, goal_grid):
        logger.warning("Parity mismatch between start and goal; search skipped")
        _show(
            frontend,
            SearchResult(
                status=SearchStatus.UNSOLVABLE,
                nodes_generated=0,
                nodes_expanded=0,
                heuristic=str(heuristic),
            ),
        )
        raise typer.Exit(code=1)

    result = solve(start_grid, goal_grid, config)
    _show(frontend, result)
    if not result.solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
