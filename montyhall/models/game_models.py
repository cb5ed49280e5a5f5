"""Pydantic models for the Monty Hall simulator.

This module defines the door, strategy and outcome enums together with the
result schemas produced by single games and batch runs. The models are
frozen so a played game cannot be altered after the fact.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DOORS: tuple[int, int, int] = (1, 2, 3)


class DoorContent(str, Enum):
    """What sits behind a door."""

    PRIZE = "car"
    DECOY = "goat"


class Strategy(str, Enum):
    """Contestant strategy after the host opens a door."""

    STAY = "stay"  # Keep the original pick
    SWITCH = "switch"  # Move to the other unopened door


class Outcome(str, Enum):
    """Result of a final door choice."""

    WIN = "WIN"
    LOSE = "LOSE"


Arrangement = tuple[DoorContent, DoorContent, DoorContent]


class GameRecord(BaseModel):
    """One (strategy, outcome) row for a played game."""

    model_config = ConfigDict(frozen=True)

    strategy: Strategy = Field(description="Strategy the contestant followed")
    outcome: Outcome = Field(description="Whether the final door held the prize")


class GameResult(BaseModel):
    """Paired stay/switch results for a single game instance.

    Both records are evaluated against the same arrangement and the same
    first pick.
    """

    model_config = ConfigDict(frozen=True)

    arrangement: Arrangement = Field(description="Door contents, door 1 first")
    first_pick: int = Field(ge=1, le=3, description="Contestant's initial door")
    opened_door: int = Field(ge=1, le=3, description="Door opened by the host")
    stay: GameRecord
    switch: GameRecord

    def records(self) -> list[GameRecord]:
        """Return the game as two rows, stay first."""
        return [self.stay, self.switch]


class StrategySummary(BaseModel):
    """Win/lose proportions for one strategy across a batch."""

    strategy: Strategy
    games: int = Field(ge=0, description="Number of records for this strategy")
    wins: int = Field(ge=0)
    losses: int = Field(ge=0)
    win_rate: float = Field(ge=0.0, le=1.0, description="Rounded share of WIN records")
    lose_rate: float = Field(ge=0.0, le=1.0, description="Rounded share of LOSE records")


class BatchSummary(BaseModel):
    """Per-strategy proportions for a batch of games."""

    n_games: int = Field(ge=0)
    precision: int = Field(ge=0, description="Decimal places used for rates")
    strategies: dict[Strategy, StrategySummary] = Field(default_factory=dict)

    def win_rate(self, strategy: Strategy | str) -> float:
        return self.strategies[Strategy(strategy)].win_rate


class BatchResult(BaseModel):
    """All records from a batch run plus the derived summary."""

    n_games: int = Field(ge=0, description="Number of games played")
    records: list[GameRecord] = Field(
        default_factory=list,
        description="Two records per game, stay then switch, in play order",
    )
    summary: BatchSummary

    def to_rows(self) -> list[dict[str, Any]]:
        """Return records as plain strategy/outcome dicts."""
        return [
            {"strategy": r.strategy.value, "outcome": r.outcome.value} for r in self.records
        ]


class SimulationConfig(BaseModel):
    """Configuration for a batch simulation run."""

    n_games: int = Field(default=100, gt=0, description="Number of games to play")
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducibility",
    )
    precision: int = Field(
        default=2, ge=0, le=10, description="Decimal places for reported proportions"
    )
    report: bool = Field(
        default=True,
        description="Whether to print the summary table after the run",
    )
