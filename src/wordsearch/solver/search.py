"""
Word search module for locating words on a character grid.

A word is located by:
1. Anchoring on every occurrence of its first letter (row by row)
2. Picking a neighbor of the anchor that holds its second letter, which fixes the direction
3. Scanning in that direction until as many letters as the word are collected
4. Comparing the scanned letters with the word (exact, case-sensitive)

The first placement that matches is returned.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .models import Grid, PlacedCharacter, Position, PositionRange, Puzzle, SolveResult
from .grid import cell_at, find_character, adjacent_characters

logger = logging.getLogger(__name__)


def scan(
    word: str,
    anchor: Position,
    second: Position,
    grid: Grid
) -> Optional[List[PlacedCharacter]]:
    """
    Scan from `anchor` through `second` and beyond for the rest of `word`.

    Args:
        word: Target word, at least 2 characters long
        anchor: Cell holding the first letter
        second: Adjacent cell holding the second letter
        grid: The grid to read from

    Returns:
        The placement if the scanned letters spell `word`, otherwise None
        (including when the scan runs off the grid)
    """
    dx = second.x - anchor.x
    dy = second.y - anchor.y

    placement = [
        PlacedCharacter(word[0], anchor),
        PlacedCharacter(word[1], second),
    ]
    scanned = word[0] + word[1]

    current = second
    while len(scanned) < len(word):
        current = Position(current.x + dx, current.y + dy)
        character = cell_at(current, grid)
        if character is None:
            return None
        placement.append(PlacedCharacter(character, current))
        scanned += character

    if scanned != word:
        return None
    return placement


def find_word(word: str, grid: Grid) -> Optional[List[PlacedCharacter]]:
    """
    Find `word` on the grid and return its placement, or None if absent.

    Raises:
        ValueError: If `word` is empty
    """
    if not word:
        raise ValueError("Cannot search for an empty word")

    anchors = find_character(word[0], grid)

    if len(word) == 1:
        if not anchors:
            return None
        return [PlacedCharacter(word[0], anchors[0])]

    for anchor in anchors:
        seconds = adjacent_characters(anchor, grid).get(word[1], [])

        # Every matching neighbor is a direction worth trying
        for second in seconds:
            placement = scan(word, anchor, second, grid)
            if placement is not None:
                logger.debug(f"Found '{word}' starting at {tuple(anchor)}")
                return placement

    logger.debug(f"'{word}' not found")
    return None


def solve(grid: Grid, words: Iterable[str]) -> Dict[str, PositionRange]:
    """
    Find every word on the grid.

    Returns a mapping from word to its PositionRange. Words that are not on
    the grid, and words too short to form a range, are left out.
    """
    found: Dict[str, PositionRange] = {}

    for word in words:
        placement = find_word(word, grid)
        if placement is None:
            continue

        word_range = PositionRange.from_positions(p.position for p in placement)
        if word_range is None:
            logger.debug(f"'{word}' is too short to report a range")
            continue

        found[word] = word_range

    return found


def solve_puzzle(puzzle: Puzzle) -> SolveResult:
    """Solve a validated puzzle and collect the results."""
    found = solve(puzzle.grid, puzzle.words)

    result = SolveResult(
        name=puzzle.name,
        words=list(puzzle.words),
        found=found,
    )

    logger.info(
        f"Found {result.found_count} of {result.total} words "
        f"({result.percent_found}%)"
    )
    return result
