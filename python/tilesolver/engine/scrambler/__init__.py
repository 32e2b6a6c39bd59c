from tilesolver.engine.scrambler.scrambler import is_solvable, scramble

__all__ = ["is_solvable", "scramble"]
