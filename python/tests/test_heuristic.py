"""Heuristic values, bounds and consistency."""

from __future__ import annotations

import random

import pytest

from tilesolver.engine.heuristic import HeuristicEvaluator, HeuristicKind, heuristic
from tilesolver.engine.scrambler import scramble
from tilesolver.engine.successor import neighbours
from tilesolver.errors import InvalidGridError
from tilesolver.models.grid import Grid

KINDS = list(HeuristicKind)


@pytest.mark.parametrize("kind", KINDS, ids=str)
@pytest.mark.parametrize("count_blank", [True, False], ids=["blank", "no-blank"])
def test_goal_scores_zero(goal: Grid, kind: HeuristicKind, count_blank: bool) -> None:
    assert heuristic(goal, goal, kind, count_blank) == 0


@pytest.mark.parametrize(
    "kind, count_blank, expected",
    [
        (HeuristicKind.MISPLACED, True, 3),
        (HeuristicKind.MISPLACED, False, 2),
        (HeuristicKind.MANHATTAN, True, 4),
        (HeuristicKind.MANHATTAN, False, 2),
    ],
    ids=["misplaced", "misplaced-no-blank", "manhattan", "manhattan-no-blank"],
)
def test_known_values(
    near_start: Grid, goal: Grid, kind: HeuristicKind, count_blank: bool, expected: int
) -> None:
    assert heuristic(near_start, goal, kind, count_blank) == expected


def test_kind_accepts_plain_strings(near_start: Grid, goal: Grid) -> None:
    evaluator = HeuristicEvaluator("manhattan", goal)  # type: ignore[arg-type]
    assert evaluator.kind is HeuristicKind.MANHATTAN
    assert evaluator(near_start) == 4


def test_misplaced_with_every_cell_wrong(goal: Grid) -> None:
    shifted = Grid.from_flat([0, 1, 2, 3, 4, 5, 6, 7, 8])
    evaluator = HeuristicEvaluator(HeuristicKind.MISPLACED, goal)
    assert evaluator(shifted) == 9 == evaluator.max_value


@pytest.mark.parametrize(
    "kind, count_blank, expected",
    [
        (HeuristicKind.MISPLACED, True, 9),
        (HeuristicKind.MISPLACED, False, 8),
        (HeuristicKind.MANHATTAN, True, 30),
        (HeuristicKind.MANHATTAN, False, 26),
    ],
    ids=["misplaced", "misplaced-no-blank", "manhattan", "manhattan-no-blank"],
)
def test_max_value(goal: Grid, kind: HeuristicKind, count_blank: bool, expected: int) -> None:
    assert HeuristicEvaluator(kind, goal, count_blank).max_value == expected


@pytest.mark.parametrize("kind", KINDS, ids=str)
@pytest.mark.parametrize("count_blank", [True, False], ids=["blank", "no-blank"])
def test_values_stay_within_bounds(goal: Grid, kind: HeuristicKind, count_blank: bool) -> None:
    rng = random.Random(1234)
    evaluator = HeuristicEvaluator(kind, goal, count_blank)
    for _ in range(200):
        grid = scramble(goal, rng.randint(0, 60), rng)
        assert 0 <= evaluator(grid) <= evaluator.max_value


@pytest.mark.parametrize("kind", KINDS, ids=str)
def test_without_blank_changes_by_at_most_one_per_slide(goal: Grid, kind: HeuristicKind) -> None:
    rng = random.Random(99)
    evaluator = HeuristicEvaluator(kind, goal, count_blank=False)
    for _ in range(100):
        grid = scramble(goal, rng.randint(0, 40), rng)
        h = evaluator(grid)
        for child in neighbours(grid):
            assert abs(evaluator(child) - h) <= 1


@pytest.mark.parametrize("kind", KINDS, ids=str)
def test_size_mismatch_is_rejected(goal: Grid, kind: HeuristicKind) -> None:
    bigger = Grid.from_flat(list(range(16)), size=4)
    with pytest.raises(InvalidGridError, match="4×4"):
        heuristic(bigger, goal, kind)
