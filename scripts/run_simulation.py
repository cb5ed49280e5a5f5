#!/usr/bin/env python3
"""CLI tool to run a batch of Monty Hall games and print the results."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
from montyhall.core.logging_config import setup_logging
from montyhall.core.settings import get_settings
from montyhall.services.monty_hall import MontyHallError
from montyhall.services.simulator import format_summary, play_n_games


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser
    """
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Simulate the Monty Hall problem and compare stay vs switch."
    )
    parser.add_argument(
        "-n",
        "--games",
        type=int,
        default=settings.default_games,
        help=f"Number of games to play (default: {settings.default_games})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--precision",
        type=int,
        default=settings.precision,
        help="Decimal places for proportions (0-10)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="DIR",
        help="Also write JSON logs to DIR/montyhall.log",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON instead of a table",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and print the summary."""
    args = build_parser().parse_args(argv)
    setup_logging(
        log_level=args.log_level,
        enable_file=args.log_file is not None,
        log_dir=args.log_file,
    )

    try:
        result = play_n_games(
            args.games,
            seed=args.seed,
            precision=args.precision,
            report=False,
        )
    except MontyHallError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.summary.model_dump_json(indent=2))
    else:
        print(f"Played {result.n_games} games")
        print(format_summary(result.summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
