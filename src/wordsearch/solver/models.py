"""Data models for the word search solver."""

from typing import Annotated, Dict, Iterable, List, NamedTuple, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


# A grid cell holds exactly one character
Cell = Annotated[str, Field(min_length=1, max_length=1)]
Grid = List[List[str]]


class Position(NamedTuple):
    """A cell on the grid: x is the column, y is the row."""
    x: int
    y: int


class PlacedCharacter(NamedTuple):
    """One letter of a candidate placement and the cell it was read from."""
    character: str
    position: Position


class PositionRange(BaseModel):
    """The two extreme ends of a found word's placement."""
    model_config = ConfigDict(frozen=True)

    initial: Position
    final: Position

    @classmethod
    def from_positions(cls, positions: Iterable[Position]) -> Optional["PositionRange"]:
        """
        Build a range from the cells a word occupies.

        Positions are ordered by x, ties broken by y, and the first and last
        become the endpoints. Fewer than 3 positions yield None.
        """
        ordered = sorted(positions, key=lambda p: (p.x, p.y))
        if len(ordered) <= 2:
            return None
        return cls(initial=ordered[0], final=ordered[-1])

    def __str__(self) -> str:
        return (
            f"({self.initial.x},{self.initial.y})"
            f"...({self.final.x},{self.final.y})"
        )


class Puzzle(BaseModel):
    """A grid and the words to look for in it."""
    name: Optional[str] = None
    grid: List[List[Cell]]
    words: List[Annotated[str, Field(min_length=1)]]


class SolveResult(BaseModel):
    """Result of solving a puzzle."""
    name: Optional[str] = None
    words: List[str] = Field(default_factory=list)
    found: Dict[str, PositionRange] = Field(default_factory=dict)

    @computed_field
    @property
    def not_found(self) -> List[str]:
        """Words absent from `found`, in input order, without duplicates."""
        missing: List[str] = []
        for word in self.words:
            if word not in self.found and word not in missing:
                missing.append(word)
        return missing

    @property
    def found_count(self) -> int:
        return len(self.found)

    @property
    def total(self) -> int:
        return len(self.words)

    @computed_field
    @property
    def percent_found(self) -> int:
        """Percentage of words found, truncated to an integer."""
        if not self.words:
            return 0
        return self.found_count * 100 // self.total
