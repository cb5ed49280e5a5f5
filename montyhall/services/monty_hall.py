"""Single-game mechanics for the three-door Monty Hall problem.

Each step of a game is a separate function so it can be tested on its own:

    arrangement = create_game(rng)
    pick = select_door(rng)
    opened = open_goat_door(arrangement, pick, rng)
    final = change_door(Strategy.SWITCH, opened, pick)
    outcome = determine_winner(final, arrangement)

Functions that draw random numbers take an optional ``random.Random``.
Passing a seeded instance makes a game reproducible; when omitted a fresh
generator is created so no state is shared between calls.
"""

import random

from montyhall.core.logging_config import get_logger
from montyhall.models.game_models import (
    DOORS,
    Arrangement,
    DoorContent,
    GameRecord,
    GameResult,
    Outcome,
    Strategy,
)

logger = get_logger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class MontyHallError(ValueError):
    """Base exception for invalid game inputs."""

    pass


class InvalidDoorError(MontyHallError):
    """Raised when a door index is outside 1..3 or doors collide."""

    pass


class InvalidArrangementError(MontyHallError):
    """Raised when an arrangement is not three doors with one prize."""

    pass


# =============================================================================
# Validation helpers
# =============================================================================


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_door(door: int, name: str = "door") -> None:
    if isinstance(door, bool) or door not in DOORS:
        raise InvalidDoorError(f"{name} must be one of {DOORS}, got {door!r}")


def _check_arrangement(arrangement: Arrangement) -> None:
    if len(arrangement) != len(DOORS):
        raise InvalidArrangementError(
            f"Arrangement must have {len(DOORS)} doors, got {len(arrangement)}"
        )
    prizes = sum(1 for content in arrangement if content == DoorContent.PRIZE)
    if prizes != 1:
        raise InvalidArrangementError(f"Arrangement must hold exactly one prize, found {prizes}")


# =============================================================================
# Game steps
# =============================================================================


def create_game(rng: random.Random | None = None) -> Arrangement:
    """Place one prize and two decoys behind the three doors.

    Returns:
        A 3-tuple of DoorContent; position ``i`` is door ``i + 1``.
    """
    rng = _resolve_rng(rng)
    contents = [DoorContent.DECOY, DoorContent.DECOY, DoorContent.PRIZE]
    return tuple(rng.sample(contents, k=len(contents)))


def select_door(rng: random.Random | None = None) -> int:
    """Pick one of the three doors with equal probability."""
    rng = _resolve_rng(rng)
    return rng.choice(DOORS)


def open_goat_door(
    arrangement: Arrangement,
    pick: int,
    rng: random.Random | None = None,
) -> int:
    """Choose the door the host opens to reveal a decoy.

    If the contestant picked the prize, the host opens either decoy door
    with equal probability. Otherwise exactly one unpicked decoy remains
    and the host opens it without drawing from ``rng``.

    Args:
        arrangement: Door contents from create_game().
        pick: The contestant's door (1..3).
        rng: Random source used only when the pick holds the prize.

    Returns:
        A door index that is not ``pick`` and holds a decoy.

    Raises:
        InvalidDoorError: If pick is not a valid door.
        InvalidArrangementError: If arrangement is malformed.
    """
    _check_arrangement(arrangement)
    _check_door(pick, "pick")

    goat_doors = [
        door
        for door in DOORS
        if door != pick and arrangement[door - 1] == DoorContent.DECOY
    ]

    if arrangement[pick - 1] == DoorContent.PRIZE:
        return _resolve_rng(rng).choice(goat_doors)
    return goat_doors[0]


def change_door(strategy: Strategy | str, opened: int, pick: int) -> int:
    """Return the contestant's final door under a strategy.

    Args:
        strategy: Strategy.STAY keeps ``pick``; Strategy.SWITCH takes the
            remaining unopened door.
        opened: Door opened by the host.
        pick: The contestant's original door.

    Raises:
        InvalidDoorError: If either door is invalid or ``opened == pick``.
    """
    strategy = Strategy(strategy)
    _check_door(opened, "opened")
    _check_door(pick, "pick")
    if opened == pick:
        raise InvalidDoorError(f"Host cannot open the picked door ({pick})")

    if strategy is Strategy.STAY:
        return pick
    return next(door for door in DOORS if door not in (opened, pick))


def determine_winner(final_pick: int, arrangement: Arrangement) -> Outcome:
    """WIN if the final door hides the prize, LOSE otherwise."""
    _check_door(final_pick, "final_pick")
    if arrangement[final_pick - 1] == DoorContent.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE


def play_game(rng: random.Random | None = None) -> GameResult:
    """Play one game and evaluate both strategies on it.

    Stay and switch share the same arrangement and first pick, so their
    outcomes are always complementary.
    """
    rng = _resolve_rng(rng)

    arrangement = create_game(rng)
    first_pick = select_door(rng)
    opened = open_goat_door(arrangement, first_pick, rng)

    final_stay = change_door(Strategy.STAY, opened, first_pick)
    final_switch = change_door(Strategy.SWITCH, opened, first_pick)

    outcome_stay = determine_winner(final_stay, arrangement)
    outcome_switch = determine_winner(final_switch, arrangement)

    logger.debug(
        f"Game played: pick={first_pick} opened={opened} "
        f"stay={outcome_stay.value} switch={outcome_switch.value}"
    )

    return GameResult(
        arrangement=arrangement,
        first_pick=first_pick,
        opened_door=opened,
        stay=GameRecord(strategy=Strategy.STAY, outcome=outcome_stay),
        switch=GameRecord(strategy=Strategy.SWITCH, outcome=outcome_switch),
    )
