"""Batch simulation of Monty Hall games.

Aggregation and presentation are separate steps: ``summarize_records``
computes proportions, ``format_summary``/``print_summary`` render them.
``play_n_games`` runs a batch and prints the summary unless told not to.
"""

import random
import sys
from collections import Counter
from typing import Any, TextIO

from montyhall.core.logging_config import get_logger
from montyhall.core.settings import get_settings
from montyhall.models.game_models import (
    BatchResult,
    BatchSummary,
    GameRecord,
    Outcome,
    SimulationConfig,
    Strategy,
    StrategySummary,
)
from montyhall.services.monty_hall import MontyHallError, play_game

logger = get_logger(__name__)


class InvalidGameCountError(MontyHallError):
    """Raised when a batch size is not a positive integer."""

    pass


class InvalidPrecisionError(MontyHallError):
    """Raised when the rounding precision is outside 0..MAX_PRECISION."""

    pass


MAX_PRECISION = 10


# =============================================================================
# Aggregation
# =============================================================================


def summarize_records(records: list[GameRecord], precision: int = 2) -> BatchSummary:
    """Compute per-strategy win/lose proportions.

    Args:
        records: Game records, two per game.
        precision: Decimal places to round rates to.

    Returns:
        BatchSummary with one entry per strategy, stay first.
    """
    counts: Counter[tuple[Strategy, Outcome]] = Counter(
        (record.strategy, record.outcome) for record in records
    )

    strategies: dict[Strategy, StrategySummary] = {}
    for strategy in Strategy:
        wins = counts[(strategy, Outcome.WIN)]
        losses = counts[(strategy, Outcome.LOSE)]
        games = wins + losses
        strategies[strategy] = StrategySummary(
            strategy=strategy,
            games=games,
            wins=wins,
            losses=losses,
            win_rate=round(wins / games, precision) if games else 0.0,
            lose_rate=round(losses / games, precision) if games else 0.0,
        )

    n_games = max((s.games for s in strategies.values()), default=0)
    return BatchSummary(n_games=n_games, precision=precision, strategies=strategies)


# =============================================================================
# Presentation
# =============================================================================


def format_summary(summary: BatchSummary) -> str:
    """Render the summary as a strategy x outcome proportion table.

    Example (precision 2):

                  outcome
        strategy   LOSE   WIN
          stay     0.67  0.33
          switch   0.33  0.67
    """
    width = summary.precision + 4
    outcomes = [Outcome.LOSE, Outcome.WIN]

    header = "strategy " + "".join(f"{o.value:>{width}}" for o in outcomes)
    lines = [" " * 10 + "outcome", header]
    for strategy, stats in summary.strategies.items():
        rates = {Outcome.WIN: stats.win_rate, Outcome.LOSE: stats.lose_rate}
        row = f"  {strategy.value:<7}" + "".join(
            f"{rates[o]:>{width}.{summary.precision}f}" for o in outcomes
        )
        lines.append(row)
    return "\n".join(lines)


def print_summary(summary: BatchSummary, file: TextIO | None = None) -> None:
    """Write the summary table to ``file`` (stdout by default)."""
    print(format_summary(summary), file=file or sys.stdout)


# =============================================================================
# Batch runner
# =============================================================================


def _validate_game_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidGameCountError(f"Number of games must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidGameCountError(f"Number of games must be positive, got {n}")
    return n


def _validate_precision(precision: Any) -> int:
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not 0 <= precision <= MAX_PRECISION
    ):
        raise InvalidPrecisionError(
            f"Precision must be an integer between 0 and {MAX_PRECISION}, got {precision!r}"
        )
    return precision


def play_n_games(
    n: int | None = None,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    precision: int | None = None,
    report: bool = True,
) -> BatchResult:
    """Play ``n`` games and tabulate outcomes per strategy.

    Args:
        n: Number of games (defaults to MONTYHALL_DEFAULT_GAMES, i.e. 100).
        seed: Seed for a new random.Random. Mutually exclusive with rng.
        rng: Random source to draw from.
        precision: Decimal places for proportions (defaults to settings).
        report: Print the summary table after the run.

    Returns:
        BatchResult with 2n records in play order and the summary.

    Raises:
        InvalidGameCountError: If n is not a positive integer.
        InvalidPrecisionError: If precision is not an integer in 0..10.
        ValueError: If both seed and rng are given.
    """
    settings = get_settings()
    n = _validate_game_count(settings.default_games if n is None else n)
    precision = _validate_precision(settings.precision if precision is None else precision)

    if seed is not None and rng is not None:
        raise ValueError("Pass either seed or rng, not both")
    if rng is None:
        # seed stays None when the caller passes rng
        seed = seed if seed is not None else settings.seed
        rng = random.Random(seed)

    logger.info(
        f"Starting batch of {n} games",
        extra={"extra_data": {"n_games": n, "seed": seed}},
    )

    records: list[GameRecord] = []
    for _ in range(n):
        records.extend(play_game(rng).records())

    summary = summarize_records(records, precision)
    logger.info(
        f"Batch complete: stay={summary.win_rate(Strategy.STAY)} "
        f"switch={summary.win_rate(Strategy.SWITCH)}",
        extra={
            "extra_data": {
                "n_games": n,
                "stay_wins": summary.strategies[Strategy.STAY].wins,
                "switch_wins": summary.strategies[Strategy.SWITCH].wins,
            }
        },
    )

    if report:
        print_summary(summary)

    return BatchResult(n_games=n, records=records, summary=summary)


def run_simulation(config: SimulationConfig | dict | None = None) -> BatchResult:
    """Run a batch from a SimulationConfig or a plain config dict.

    Fields a dict leaves out take ``n_games`` and ``precision`` from
    settings, as does the default config.

    Args:
        config: Simulation configuration; dicts are validated by pydantic.

    Returns:
        BatchResult for the configured run.
    """
    if not isinstance(config, SimulationConfig):
        settings = get_settings()
        defaults = {"n_games": settings.default_games, "precision": settings.precision}
        config = SimulationConfig.model_validate({**defaults, **(config or {})})

    return play_n_games(
        config.n_games,
        seed=config.seed,
        precision=config.precision,
        report=config.report,
    )
