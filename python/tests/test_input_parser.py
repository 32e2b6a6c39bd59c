from __future__ import annotations

import pytest

from tilesolver.errors import InvalidGridError
from tilesolver.frontend.cli.input_parser import parse_grid, read_grid
from tilesolver.models.grid import Grid

EXPECTED = Grid.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])


@pytest.mark.parametrize(
    "text",
    [
        "1 2 3 4 0 6 7 5 8",
        "1,2,3,4,0,6,7,5,8",
        "  1, 2, 3;\n4 0 6\n7 5 8  ",
        "123406758",
        "[1, 2, 3, 4, 0, 6, 7, 5, 8]",
    ],
    ids=["spaces", "commas", "mixed", "compact", "brackets"],
)
def test_parse_grid_forms(text: str) -> None:
    assert parse_grid(text) == EXPECTED


@pytest.mark.parametrize(
    "text",
    ["1 2 3 4 0 6 7 5", "1 2 3 4 x 6 7 5 8", "12340675", "1 2 3 4 4 6 7 5 8", ""],
    ids=["short", "not-a-number", "compact-short", "duplicate", "empty"],
)
def test_parse_grid_rejects(text: str) -> None:
    with pytest.raises(InvalidGridError):
        parse_grid(text)


def test_read_grid_row_by_row() -> None:
    lines = iter(["1 2 3", "", "4 0 6", "7 5 8"])
    prompts: list[str] = []

    def reader(prompt: str) -> str:
        prompts.append(prompt)
        return next(lines)

    assert read_grid("initial", reader=reader) == EXPECTED
    assert "initial" in prompts[0]
    assert prompts[1:] == ["", "", ""]


def test_read_grid_all_on_one_line() -> None:
    assert read_grid("goal", reader=lambda _: "1 2 3 4 0 6 7 5 8") == EXPECTED


def test_read_grid_too_many_values() -> None:
    lines = iter(["1 2 3 4", "0 6 7 5 8 9"])
    with pytest.raises(InvalidGridError, match="Expected 9 values"):
        read_grid("goal", reader=lambda _: next(lines))
