"""Pydantic models for the Monty Hall simulator."""

from montyhall.models.game_models import (
    DOORS,
    Arrangement,
    BatchResult,
    BatchSummary,
    DoorContent,
    GameRecord,
    GameResult,
    Outcome,
    SimulationConfig,
    Strategy,
    StrategySummary,
)

__all__ = [
    # Enums and aliases
    "DOORS",
    "Arrangement",
    "DoorContent",
    "Outcome",
    "Strategy",
    # Result models
    "BatchResult",
    "BatchSummary",
    "GameRecord",
    "GameResult",
    "StrategySummary",
    # Configuration
    "SimulationConfig",
]
