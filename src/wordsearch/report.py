"""Rendering and saving of solve results."""

import json
from pathlib import Path
from typing import List, Union

from .solver.models import SolveResult


def render_report(result: SolveResult) -> str:
    """
    Render a human-readable summary of a solve result.

    Example:
        FOUND 1 OUT OF 2 WORDS (50%):
        =============================

        CAT: (0,0)...(2,0)

        NOT FOUND: DOG
    """
    header = f"FOUND {result.found_count} OUT OF {result.total} WORDS ({result.percent_found}%):"
    lines: List[str] = [header, "=" * len(header), ""]

    reported = set()
    for word in result.words:
        if word in result.found and word not in reported:
            lines.append(f"{word}: {result.found[word]}")
            reported.add(word)

    if result.not_found:
        lines.append("")
        lines.append(f"NOT FOUND: {', '.join(result.not_found)}")

    return '\n'.join(lines)


def save_result(result: SolveResult, path: Union[str, Path]) -> Path:
    """
    Save a solve result to a JSON file.

    Args:
        result: The result to save
        path: Path to save the result file

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.model_dump(mode='json'), f, indent=2)

    return path
