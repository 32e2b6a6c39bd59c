"""A* search for the sliding-tile 8-puzzle."""

from tilesolver.config import SearchConfig
from tilesolver.engine.heuristic import HeuristicKind, heuristic
from tilesolver.engine.scrambler import is_solvable, scramble
from tilesolver.engine.search import AStarSearch, solve
from tilesolver.errors import InvalidGridError, PuzzleError, SearchInvariantError
from tilesolver.models import Direction, Grid, SearchResult, SearchStatus

__all__ = [
    "AStarSearch",
    "Direction",
    "Grid",
    "HeuristicKind",
    "InvalidGridError",
    "PuzzleError",
    "SearchConfig",
    "SearchInvariantError",
    "SearchResult",
    "SearchStatus",
    "heuristic",
    "is_solvable",
    "scramble",
    "solve",
]
