"""Exceptions raised by the puzzle solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by ``tilesolver``."""


class InvalidGridError(PuzzleError, ValueError):
    """A start or goal grid is malformed.

    Raised before any search begins: wrong tile count, values outside
    ``0..N*N-1``, repeated values, ragged rows, or a start and goal of
    different sizes.
    """


class SearchInvariantError(PuzzleError, RuntimeError):
    """An internal search invariant was broken (e.g. a negative cost).

    This is a logic error in the solver, not something a caller can fix
    by changing its input.
    """
