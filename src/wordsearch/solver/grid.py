"""Grid lookup and rendering utilities."""

from typing import Dict, List, Optional, Tuple

from .models import Grid, Position


# Neighbor offsets (dx, dy), top row first, left to right
OFFSETS: List[Tuple[int, int]] = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]


def cell_at(position: Position, grid: Grid) -> Optional[str]:
    """Return the character at `position`, or None if it lies outside the grid."""
    x, y = position
    if y < 0 or y >= len(grid):
        return None
    row = grid[y]
    if x < 0 or x >= len(row):
        return None
    return row[x]


def find_character(character: str, grid: Grid) -> List[Position]:
    """Find every cell holding `character`, row by row, left to right."""
    return [
        Position(x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == character
    ]


def adjacent_positions(position: Position, grid: Grid) -> List[Position]:
    """Return the up to 8 in-bounds cells touching `position`."""
    x, y = position
    candidates = [Position(x + dx, y + dy) for dx, dy in OFFSETS]

    # Cells on an edge, a corner or a short row have fewer neighbors
    return [p for p in candidates if cell_at(p, grid) is not None]


def adjacent_characters(position: Position, grid: Grid) -> Dict[str, List[Position]]:
    """Group the cells touching `position` by the character they hold."""
    neighbors: Dict[str, List[Position]] = {}

    for neighbor in adjacent_positions(position, grid):
        neighbors.setdefault(grid[neighbor.y][neighbor.x], []).append(neighbor)

    return neighbors


def render_grid(grid: Grid, separator: str = " ") -> str:
    """Render the grid to a string, one line per row."""
    return '\n'.join(separator.join(row) for row in grid)
