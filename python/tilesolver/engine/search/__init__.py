from tilesolver.engine.search.context import SearchContext, SearchPhase
from tilesolver.engine.search.driver import AStarSearch, as_grid, solve
from tilesolver.engine.search.fringe import Fringe
from tilesolver.engine.search.node import SearchNode
from tilesolver.engine.search.path import reconstruct_path

__all__ = [
    "AStarSearch",
    "Fringe",
    "SearchContext",
    "SearchNode",
    "SearchPhase",
    "as_grid",
    "reconstruct_path",
    "solve",
]
