"""Tests for the Monty Hall pydantic models."""

import pytest
from pydantic import ValidationError

from montyhall.models import (
    DoorContent,
    GameRecord,
    GameResult,
    Outcome,
    SimulationConfig,
    Strategy,
    StrategySummary,
)


class TestEnums:
    """Tests for enum values."""

    def test_door_content_labels(self):
        assert DoorContent.PRIZE.value == "car"
        assert DoorContent.DECOY.value == "goat"

    def test_strategy_from_string(self):
        assert Strategy("stay") is Strategy.STAY
        assert Strategy("switch") is Strategy.SWITCH

    def test_outcome_values(self):
        assert [o.value for o in Outcome] == ["WIN", "LOSE"]


class TestGameResult:
    """Tests for GameResult."""

    def _result(self, **overrides):
        data = {
            "arrangement": (DoorContent.DECOY, DoorContent.DECOY, DoorContent.PRIZE),
            "first_pick": 1,
            "opened_door": 2,
            "stay": GameRecord(strategy=Strategy.STAY, outcome=Outcome.LOSE),
            "switch": GameRecord(strategy=Strategy.SWITCH, outcome=Outcome.WIN),
        }
        data.update(overrides)
        return GameResult(**data)

    def test_records_stay_first(self):
        records = self._result().records()
        assert [r.strategy for r in records] == [Strategy.STAY, Strategy.SWITCH]

    def test_arrangement_from_strings(self):
        """Arrangement accepts the string labels."""
        result = self._result(arrangement=("goat", "car", "goat"))
        assert result.arrangement[1] is DoorContent.PRIZE

    def test_door_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            self._result(first_pick=4)

    def test_wrong_arrangement_length_rejected(self):
        with pytest.raises(ValidationError):
            self._result(arrangement=("goat", "car"))


class TestStrategySummary:
    """Tests for StrategySummary bounds."""

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValidationError):
            StrategySummary(
                strategy=Strategy.STAY, games=1, wins=1, losses=0, win_rate=1.5, lose_rate=0.0
            )


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_defaults(self):
        config = SimulationConfig()

        assert config.n_games == 100
        assert config.seed is None
        assert config.precision == 2
        assert config.report is True

    def test_zero_games_rejected(self):
        with pytest.raises(ValidationError):
            SimulationConfig(n_games=0)

    def test_precision_bounds(self):
        with pytest.raises(ValidationError):
            SimulationConfig(precision=-1)
