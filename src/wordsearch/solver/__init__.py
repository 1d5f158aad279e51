"""Word search solving for wordsearch."""

from .search import solve, solve_puzzle, find_word, scan
from .models import Position, PlacedCharacter, PositionRange, Puzzle, SolveResult, Grid
from .grid import (
    OFFSETS,
    cell_at,
    find_character,
    adjacent_positions,
    adjacent_characters,
    render_grid,
)

__all__ = [
    # Main solving
    "solve",
    "solve_puzzle",
    "find_word",
    "scan",
    # Models
    "Position",
    "PlacedCharacter",
    "PositionRange",
    "Puzzle",
    "SolveResult",
    "Grid",
    # Grid utilities
    "OFFSETS",
    "cell_at",
    "find_character",
    "adjacent_positions",
    "adjacent_characters",
    "render_grid",
]
