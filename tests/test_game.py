import random
from dataclasses import replace

import pytest

from artillery_game.core.config import GameConfig
from artillery_game.core.game import (
    Command,
    EventKind,
    GameState,
    Phase,
    Schedule,
    new_match,
)
from artillery_game.core.projectile import Aim, Position


def test_aim_adjustments_while_aiming(flat_state: GameState):
    state = flat_state
    for command in (
        Command.ANGLE_INCREASE,
        Command.ANGLE_INCREASE,
        Command.ANGLE_DECREASE,
        Command.POWER_INCREASE,
        Command.POWER_DECREASE,
        Command.POWER_DECREASE,
    ):
        transition = state.apply(command)
        assert transition.schedule is None
        assert transition.quit is False
        state = transition.state

    assert state.aim == Aim(50, 19)
    assert flat_state.aim == Aim(45, 20)


def test_angle_and_power_are_unbounded(flat_state: GameState):
    state = flat_state
    for _ in range(40):
        state = state.apply(Command.ANGLE_INCREASE).state
        state = state.apply(Command.POWER_DECREASE).state

    assert state.aim == Aim(245, -20)


def test_fire_starts_simulation(flat_state: GameState):
    moved = replace(flat_state, projectile=Position(40, 20), elapsed=1.5)

    transition = moved.apply(Command.FIRE)

    assert transition.state.phase is Phase.SIMULATING
    assert transition.state.elapsed == 0.0
    assert transition.state.projectile == Position(2, 10)
    assert transition.schedule == Schedule(EventKind.TICK, 0.1)


def test_string_commands_are_accepted(flat_state: GameState):
    assert flat_state.apply("angle-increase").state.aim.angle == 50


def test_quit_is_valid_while_simulating(flat_state: GameState):
    flying = flat_state.apply(Command.FIRE).state

    transition = flying.apply(Command.QUIT)

    assert transition.quit is True
    assert transition.state is flying


@pytest.mark.parametrize(
    "command",
    [
        Command.ANGLE_DECREASE,
        Command.ANGLE_INCREASE,
        Command.POWER_INCREASE,
        Command.POWER_DECREASE,
        Command.FIRE,
    ],
)
def test_commands_ignored_while_simulating(flat_state: GameState, command: Command):
    flying = flat_state.apply(Command.FIRE).state

    transition = flying.apply(command)

    assert transition.state is flying
    assert transition.schedule is None


def test_first_tick_moves_projectile(flat_state: GameState):
    flying = flat_state.apply(Command.FIRE).state

    transition = flying.tick()

    assert transition.state.projectile == Position(3, 11)
    assert transition.state.elapsed == pytest.approx(0.1)
    assert transition.state.simulating is True
    assert transition.schedule == Schedule(EventKind.TICK, 0.1)


def test_tick_is_noop_when_not_simulating(flat_state: GameState):
    transition = flat_state.tick()

    assert transition.state is flat_state
    assert transition.schedule is None


def test_miss_schedules_reset(flat_state: GameState):
    state = flat_state.apply(Command.FIRE).state
    transition = state.tick()
    ticks = 1
    while transition.state.simulating:
        assert transition.schedule.kind is EventKind.TICK
        transition = transition.state.tick()
        ticks += 1

    assert transition.state.phase is Phase.MISSED
    assert transition.state.hit is False
    assert transition.schedule == Schedule(EventKind.RESET, 2.0)
    assert transition.state.elapsed == pytest.approx(ticks * 0.1)


def test_hit_is_terminal():
    terrain = (12,) + (10,) * 11
    state = GameState(
        terrain=terrain,
        tank_column=0,
        target_column=5,
        projectile=Position(0, 12),
        aim=Aim(0, 50),
    )
    flying = state.apply(Command.FIRE).state

    transition = flying.tick(gravity=0.0)

    hit = transition.state
    assert hit.phase is Phase.HIT
    assert hit.simulating is False
    assert transition.schedule is None
    assert hit.projectile == Position(5, 12)
    for command in (Command.FIRE, Command.ANGLE_INCREASE, Command.POWER_DECREASE):
        assert hit.apply(command).state is hit
    assert hit.apply(Command.QUIT).quit is True


def test_commands_ignored_while_reset_pending(flat_state: GameState):
    missed = replace(flat_state, missed=True)

    assert missed.apply(Command.FIRE).state is missed
    assert missed.apply(Command.ANGLE_INCREASE).state is missed


@pytest.mark.parametrize(
    "overrides",
    [
        {"tank_column": 77},
        {"tank_column": 100},
        {"target_column": -1},
        {"simulating": True, "hit": True},
        {"simulating": True, "missed": True},
        {"elapsed": -0.1},
        {"terrain": (10, -1, 10)},
        {"terrain": ()},
    ],
)
def test_invariants_are_enforced(flat_state: GameState, overrides: dict):
    with pytest.raises(ValueError):
        replace(flat_state, **overrides)


def test_new_match_spawns_within_ranges():
    config = GameConfig()
    for seed in range(20):
        state = new_match(config, random.Random(seed))
        assert 1 <= state.tank_column <= 5
        assert 75 <= state.target_column <= 79
        assert len(state.terrain) == 100
        assert state.phase is Phase.AIMING
        assert state.aim == Aim(45, 20)
        assert state.projectile == state.tank_position


def test_new_match_is_reproducible():
    config = GameConfig()

    assert new_match(config, random.Random(5)) == new_match(config, random.Random(5))


def test_new_match_keeps_supplied_aim():
    state = new_match(GameConfig(), random.Random(8), aim=Aim(70, 31))

    assert state.aim == Aim(70, 31)


def test_config_rejects_overlapping_spawns():
    with pytest.raises(ValueError):
        GameConfig(tank_spawn=(1, 10), target_spawn=(10, 20))


def test_config_rejects_spawn_outside_terrain():
    with pytest.raises(ValueError):
        GameConfig(target_spawn=(95, 100))


def test_config_rejects_non_positive_gravity():
    with pytest.raises(ValueError):
        GameConfig(gravity=0.0)
