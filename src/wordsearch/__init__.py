"""Word search puzzle solver."""

from .solver import solve, solve_puzzle, Position, PositionRange, Puzzle, SolveResult
from .config import PuzzleConfig, load_config, load_demo_config

__all__ = [
    "solve",
    "solve_puzzle",
    "Position",
    "PositionRange",
    "Puzzle",
    "SolveResult",
    "PuzzleConfig",
    "load_config",
    "load_demo_config",
]
