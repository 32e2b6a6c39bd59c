from tilesolver.engine.heuristic.heuristic import (
    HeuristicEvaluator,
    HeuristicKind,
    heuristic,
)

__all__ = ["HeuristicEvaluator", "HeuristicKind", "heuristic"]
