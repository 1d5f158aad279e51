"""
Tests for grid lookups.

Covers:
- Character lookup order and misses
- Neighbor enumeration at corners, edges, the center, and on ragged grids
- Grouping neighbors by character
- Grid rendering
"""

import pytest
from wordsearch.solver import (
    Position,
    cell_at,
    find_character,
    adjacent_positions,
    adjacent_characters,
    render_grid,
)


GRID = [
    ["A", "B", "C"],
    ["D", "E", "F"],
    ["G", "H", "I"],
]

RAGGED = [
    ["A", "B", "C", "D"],
    ["E"],
    ["F", "G", "H", "I"],
]


def in_bounds(position, grid):
    return 0 <= position.y < len(grid) and 0 <= position.x < len(grid[position.y])


class TestFindCharacter:
    """Test cases for locating characters."""

    def test_single_occurrence(self):
        """A unique character is found at its cell."""
        assert find_character("E", GRID) == [Position(1, 1)]

    def test_row_major_order(self):
        """Occurrences are listed row by row, left to right."""
        grid = [
            ["A", "B", "A"],
            ["A", "C", "D"],
        ]
        assert find_character("A", grid) == [Position(0, 0), Position(2, 0), Position(0, 1)]

    def test_missing_character(self):
        """A character not on the grid yields an empty list."""
        assert find_character("Z", GRID) == []

    def test_case_sensitive(self):
        """Lookup does not fold case."""
        assert find_character("e", GRID) == []

    def test_empty_grid(self):
        """An empty grid has nothing to find."""
        assert find_character("A", []) == []


class TestCellAt:
    """Test cases for bounds-checked cell lookup."""

    def test_inside(self):
        assert cell_at(Position(2, 1), GRID) == "F"

    @pytest.mark.parametrize("position", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_outside(self, position):
        """Positions off any edge return None."""
        assert cell_at(Position(*position), GRID) is None

    def test_short_row(self):
        """A column past the end of a short row is out of bounds."""
        assert cell_at(Position(1, 1), RAGGED) is None
        assert cell_at(Position(0, 1), RAGGED) == "E"


class TestAdjacentPositions:
    """Test cases for neighbor enumeration."""

    def test_center_has_eight_neighbors(self):
        """The center of a 3x3 grid touches every other cell."""
        neighbors = adjacent_positions(Position(1, 1), GRID)
        assert len(neighbors) == 8
        assert Position(1, 1) not in neighbors

    def test_top_left_corner(self):
        """A corner has three neighbors."""
        assert adjacent_positions(Position(0, 0), GRID) == [
            Position(1, 0), Position(0, 1), Position(1, 1)
        ]

    def test_bottom_right_corner(self):
        assert adjacent_positions(Position(2, 2), GRID) == [
            Position(1, 1), Position(2, 1), Position(1, 2)
        ]

    def test_right_edge(self):
        """A cell on an edge has five neighbors."""
        assert adjacent_positions(Position(2, 1), GRID) == [
            Position(1, 0), Position(2, 0),
            Position(1, 1),
            Position(1, 2), Position(2, 2),
        ]

    def test_ragged_rows(self):
        """Cells missing from a short row are skipped."""
        assert adjacent_positions(Position(1, 0), RAGGED) == [
            Position(0, 0), Position(2, 0), Position(0, 1)
        ]

    def test_single_cell_grid(self):
        """A lone cell has no neighbors."""
        assert adjacent_positions(Position(0, 0), [["A"]]) == []

    @pytest.mark.parametrize("grid", [GRID, RAGGED, [["A"]], [["A", "B"]], [["A"], ["B"]]])
    def test_never_out_of_bounds(self, grid):
        """No neighbor of any cell falls outside the grid."""
        for y, row in enumerate(grid):
            for x in range(len(row)):
                for neighbor in adjacent_positions(Position(x, y), grid):
                    assert in_bounds(neighbor, grid)

    def test_position_outside_grid(self):
        """Neighbors of a cell just past an edge are still bounds checked."""
        for neighbor in adjacent_positions(Position(3, 3), GRID):
            assert in_bounds(neighbor, GRID)
        assert adjacent_positions(Position(3, 3), GRID) == [Position(2, 2)]


class TestAdjacentCharacters:
    """Test cases for grouping neighbors by character."""

    def test_grouping(self):
        """Neighbors holding the same character share a key."""
        grid = [
            ["A", "B", "A"],
            ["B", "X", "B"],
            ["A", "B", "A"],
        ]
        neighbors = adjacent_characters(Position(1, 1), grid)
        assert neighbors == {
            "A": [Position(0, 0), Position(2, 0), Position(0, 2), Position(2, 2)],
            "B": [Position(1, 0), Position(0, 1), Position(2, 1), Position(1, 2)],
        }

    def test_no_empty_groups(self):
        """Every key maps to at least one position."""
        for y in range(3):
            for x in range(3):
                for positions in adjacent_characters(Position(x, y), GRID).values():
                    assert positions

    def test_corner_keys(self):
        """Only characters actually touching the cell appear."""
        assert set(adjacent_characters(Position(0, 0), GRID)) == {"B", "D", "E"}

    def test_ragged(self):
        assert adjacent_characters(Position(0, 1), RAGGED) == {
            "A": [Position(0, 0)],
            "B": [Position(1, 0)],
            "F": [Position(0, 2)],
            "G": [Position(1, 2)],
        }


class TestRenderGrid:
    """Test cases for grid rendering."""

    def test_default_separator(self):
        assert render_grid(GRID) == "A B C\nD E F\nG H I"

    def test_no_separator(self):
        assert render_grid(GRID, separator="") == "ABC\nDEF\nGHI"

    def test_empty(self):
        assert render_grid([]) == ""
