from __future__ import annotations

import pytest

from tilesolver.models.grid import Grid


@pytest.fixture
def goal() -> Grid:
    return Grid.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


@pytest.fixture
def near_start() -> Grid:
    """Two slides away from ``goal``."""
    return Grid.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])


@pytest.fixture
def odd_start() -> Grid:
    """Tiles 7 and 8 swapped: wrong parity, unreachable from ``goal``."""
    return Grid.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
