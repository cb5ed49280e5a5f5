"""Shared pytest fixtures."""

import logging
import random

import pytest

from montyhall.core.settings import clear_settings_cache
from montyhall.models import DoorContent

PRIZE = DoorContent.PRIZE
DECOY = DoorContent.DECOY


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear the settings cache around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def rng():
    """Fixture providing a seeded random source."""
    return random.Random(42)


@pytest.fixture
def all_arrangements():
    """The three distinct door arrangements."""
    return [
        (PRIZE, DECOY, DECOY),
        (DECOY, PRIZE, DECOY),
        (DECOY, DECOY, PRIZE),
    ]
