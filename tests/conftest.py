import random

import pytest

from artillery_game.core.game import GameState
from artillery_game.core.projectile import Position


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def flat_terrain() -> tuple:
    """Provide level terrain so shots follow predictable arcs."""

    return tuple([10] * 100)


@pytest.fixture
def flat_state(flat_terrain: tuple) -> GameState:
    return GameState(
        terrain=flat_terrain,
        tank_column=2,
        target_column=77,
        projectile=Position(2, flat_terrain[2]),
    )
