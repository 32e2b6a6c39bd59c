from tilesolver.models.grid import DEFAULT_SIZE, Direction, Grid
from tilesolver.models.result import SearchResult, SearchStatus

__all__ = ["DEFAULT_SIZE", "Direction", "Grid", "SearchResult", "SearchStatus"]
