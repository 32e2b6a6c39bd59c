"""Reads start and goal grids typed by the user.

Accepted forms for a 3×3 grid::

    1 2 3 4 0 6 7 5 8      # whitespace separated
    1,2,3,4,0,6,7,5,8      # comma separated
    123406758              # compact digits (grids up to 3×3 only)

Interactive entry reads one row per line, as many lines as needed, until
the grid is complete.
"""

from __future__ import annotations

import re
from typing import Callable

from tilesolver.errors import InvalidGridError
from tilesolver.models.grid import DEFAULT_SIZE, Grid

_SPLIT = re.compile(r"[\s,;]+")


def _tokens(text: str, size: int) -> list[int]:
    text = text.strip().strip("[]()")
    if not text:
        return []
    # Compact digit strings only make sense while every tile is one digit.
    if size * size <= 10 and text.isdigit() and len(text) > 1:
        return [int(ch) for ch in text]
    values: list[int] = []
    for tok in _SPLIT.split(text):
        tok = tok.strip("[]()")
        if not tok:
            continue
        try:
            values.append(int(tok))
        except ValueError:
            raise InvalidGridError(f"Not an integer: {tok!r}") from None
    return values


def parse_grid(text: str, size: int = DEFAULT_SIZE) -> Grid:
    """Parse a whole grid from a single string."""
    return Grid.from_flat(_tokens(text, size), size=size)


def read_grid(
    label: str,
    size: int = DEFAULT_SIZE,
    reader: Callable[[str], str] = input,
) -> Grid:
    """Prompt for a grid row by row until ``size * size`` values are read.

    *reader* defaults to :func:`input`; tests pass a stub.
    """
    values: list[int] = []
    prompt = f"Enter the {label} state ({size} rows of {size} numbers, 0 = blank)\n"
    while len(values) < size * size:
        line = reader(prompt)
        prompt = ""
        values.extend(_tokens(line, size))
    if len(values) > size * size:
        raise InvalidGridError(
            f"Expected {size * size} values for the {label} state, got {len(values)}."
        )
    return Grid.from_flat(values, size=size)
