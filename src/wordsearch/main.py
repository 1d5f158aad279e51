"""
Main entry point for solving word search puzzles.

Usage:
    python -m wordsearch.main
    python -m wordsearch.main puzzle.yaml
    python -m wordsearch.main puzzle.yaml --output results/puzzle.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config, load_demo_config
from .logging_config import setup_logging
from .report import render_report, save_result
from .solver import render_grid, solve_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find words in a word search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example puzzle.yaml:
  name: animals
  uppercase: true
  grid:
    - CATX
    - XDOG
    - BATX
  words:
    - cat
    - dog
    - bat
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML puzzle file (default: the bundled demo puzzle)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every word lookup"
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Print the grid before the report"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    try:
        config = load_config(args.config) if args.config else load_demo_config()
        puzzle = config.to_puzzle()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.show_grid:
        print(render_grid(puzzle.grid))
        print()

    result = solve_puzzle(puzzle)
    print(render_report(result))

    if args.output:
        output_path = save_result(result, Path(args.output))
        print()
        print(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
