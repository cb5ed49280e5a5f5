"""Environment-based configuration for the Monty Hall simulator.

Values are read from the process environment, after loading a ``.env``
file if one is present.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


DEFAULT_GAMES = 100
DEFAULT_PRECISION = 2
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SimulatorSettings:
    """Default values used when a caller does not supply them."""

    default_games: int
    precision: int
    seed: int | None
    log_level: str


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@lru_cache(maxsize=1)
def get_settings() -> SimulatorSettings:
    """Load simulator settings from environment variables.

    Returns:
        SimulatorSettings with batch size, precision, seed and log level.
    """
    return SimulatorSettings(
        default_games=_int_from_env("MONTYHALL_DEFAULT_GAMES", DEFAULT_GAMES),
        precision=_int_from_env("MONTYHALL_PRECISION", DEFAULT_PRECISION),
        seed=_int_from_env("MONTYHALL_SEED", None),
        log_level=os.getenv("MONTYHALL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def clear_settings_cache() -> None:
    """Clear the cached settings.

    Useful for testing when environment variables change.
    """
    get_settings.cache_clear()
