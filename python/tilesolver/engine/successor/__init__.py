from tilesolver.engine.successor.generator import BLANK_OFFSETS, expand, neighbours

__all__ = ["BLANK_OFFSETS", "expand", "neighbours"]
