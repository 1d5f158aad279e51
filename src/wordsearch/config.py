"""Puzzle configuration loading."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .solver.models import Puzzle

logger = logging.getLogger(__name__)

DEMO_CONFIG = Path(__file__).parent / "data" / "demo.yaml"


def parse_row(row: Union[str, List[str]]) -> List[str]:
    """
    Split a grid row into cells.

    Rows may be written as contiguous characters ("ABC"), as
    space-separated characters ("A B C"), or as a YAML list.
    """
    if isinstance(row, str):
        return [ch for ch in row if not ch.isspace()]
    return list(row)


class PuzzleConfig(BaseModel):
    """Configuration for a single puzzle, as read from YAML."""
    name: Optional[str] = None
    uppercase: bool = True
    grid: List[List[str]]
    words: List[str] = Field(default_factory=list)

    @field_validator('grid', mode='before')
    @classmethod
    def split_rows(cls, value):
        if not isinstance(value, list):
            return value
        return [parse_row(row) if isinstance(row, (str, list)) else row for row in value]

    @field_validator('words', mode='before')
    @classmethod
    def strip_words(cls, value):
        # Spaces inside a word are dropped ("ICE CREAM" -> "ICECREAM")
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [
            ''.join(ch for ch in word if not ch.isspace()) if isinstance(word, str) else word
            for word in value
        ]

    def to_puzzle(self) -> Puzzle:
        """Build a validated Puzzle, applying case normalization if enabled."""
        grid = self.grid
        words = self.words

        if self.uppercase:
            grid = [[cell.upper() for cell in row] for row in grid]
            words = [word.upper() for word in words]

        return Puzzle(name=self.name, grid=grid, words=words)


def load_config(config_path: Union[str, Path]) -> PuzzleConfig:
    """Load a puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    config = PuzzleConfig(**data)
    logger.debug(
        f"Loaded puzzle '{config.name or path.stem}' from {path} "
        f"({len(config.grid)} rows, {len(config.words)} words)"
    )
    return config


def load_demo_config() -> PuzzleConfig:
    """Load the bundled demo puzzle."""
    return load_config(DEMO_CONFIG)
