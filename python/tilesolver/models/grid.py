"""Grid model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from tilesolver.errors import InvalidGridError

DEFAULT_SIZE = 3


class Direction(StrEnum):
    """Direction the *tile* slides into the blank.

    ``Direction.UP`` means the tile below the blank moves up, i.e. the
    blank itself moves down.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def between(cls, before: Grid, after: Grid) -> Direction | None:
        """Return the single slide turning *before* into *after*.

        Returns ``None`` when the two grids are not exactly one slide
        apart.
        """
        if before.size != after.size or before == after:
            return None
        br, bc = before.blank_pos
        ar, ac = after.blank_pos
        if abs(br - ar) + abs(bc - ac) != 1:
            return None
        # Only the two swapped cells may differ.
        diff = [i for i, (x, y) in enumerate(zip(before.cells, after.cells)) if x != y]
        if sorted(diff) != sorted((before.blank_index, after.blank_index)):
            return None
        # The blank moving down means the tile below moved up, and so on.
        offsets = {
            (1, 0): cls.UP,
            (-1, 0): cls.DOWN,
            (0, 1): cls.LEFT,
            (0, -1): cls.RIGHT,
        }
        return offsets[(ar - br, ac - bc)]


@dataclass(frozen=True)
class Grid:
    """Immutable snapshot of a puzzle configuration.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Two grids are equal iff their cells match one by one, which also
    makes them usable as set members and dict keys.

    Construct through :meth:`from_flat` or :meth:`from_rows`; both
    validate their input. The bare constructor does not, and is only
    used by the engine to build successors of already valid grids.
    """

    size: int
    cells: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int], size: int = DEFAULT_SIZE) -> Grid:
        """Create a grid from a flat row-major tile list.

        Example::

            Grid.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
        """
        cells = tuple(flat)
        if size < 2:
            raise InvalidGridError(f"Grid size must be at least 2, got {size}.")
        if len(cells) != size * size:
            raise InvalidGridError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(cells)}."
            )
        for v in cells:
            # bool is an int subclass; True/False are never tiles.
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidGridError(f"Tile values must be integers, got {v!r}.")
        if sorted(cells) != list(range(size * size)):
            missing = sorted(set(range(size * size)) - set(cells))
            raise InvalidGridError(
                f"A {size}×{size} grid must hold each of 0..{size * size - 1} "
                f"exactly once (missing: {missing or 'none'}, got {list(cells)})."
            )
        return cls(size=size, cells=cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Create a grid from a list of rows, e.g. ``[[1, 2, 3], ...]``."""
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidGridError(
                    f"Row {r} has {len(row)} tiles; a {size}-row grid needs "
                    f"{size} per row."
                )
        return cls.from_flat([v for row in rows for v in row], size=size)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    @property
    def blank_index(self) -> int:
        return self.cells.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    def position_of(self, value: int) -> tuple[int, int]:
        """Return the ``(row, col)`` holding *value*."""
        return divmod(self.cells.index(value), self.size)

    def format(self) -> str:
        """Render the grid as *size* lines of space-separated integers."""
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)

    def __str__(self) -> str:
        return self.format()
