"""Match state and the transitions of the aim, fire and resolve cycle."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from artillery_game.core.config import (
    ANGLE_STEP,
    POWER_STEP,
    RESET_DELAY,
    TICK_DELAY,
    GameConfig,
)
from artillery_game.core.projectile import GRAVITY, Aim, Outcome, Position, simulate_step
from artillery_game.core.terrain import TerrainGenerator

logger = logging.getLogger(__name__)


class Command(str, Enum):
    ANGLE_DECREASE = "angle-decrease"
    ANGLE_INCREASE = "angle-increase"
    POWER_INCREASE = "power-increase"
    POWER_DECREASE = "power-decrease"
    FIRE = "fire"
    QUIT = "quit"


class EventKind(str, Enum):
    TICK = "tick"
    RESET = "reset"


class Phase(str, Enum):
    AIMING = "aiming"
    SIMULATING = "simulating"
    HIT = "hit"
    MISSED = "missed"


@dataclass(frozen=True)
class Schedule:
    """Request for a single future event."""

    kind: EventKind
    delay: float


@dataclass(frozen=True)
class Transition:
    """New state plus the side effects the caller must carry out."""

    state: "GameState"
    schedule: Optional[Schedule] = None
    quit: bool = False


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a match."""

    terrain: Tuple[int, ...]
    tank_column: int
    target_column: int
    projectile: Position
    aim: Aim = Aim()
    simulating: bool = False
    hit: bool = False
    missed: bool = False
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        width = len(self.terrain)
        if width == 0:
            raise ValueError("terrain must have at least one column")
        if any(height < 0 for height in self.terrain):
            raise ValueError("terrain heights must be non-negative")
        for name, column in (("tank", self.tank_column), ("target", self.target_column)):
            if not 0 <= column < width:
                raise ValueError(f"{name} column {column} is outside 0..{width - 1}")
        if self.tank_column == self.target_column:
            raise ValueError("tank and target cannot share a column")
        if sum((self.simulating, self.hit, self.missed)) > 1:
            raise ValueError("a match is in exactly one of aiming, flight, hit or missed")
        if self.elapsed < 0:
            raise ValueError("elapsed time cannot be negative")

    # ------------------------------------------------------------------
    # Render feed
    @property
    def width(self) -> int:
        return len(self.terrain)

    @property
    def phase(self) -> Phase:
        if self.simulating:
            return Phase.SIMULATING
        if self.hit:
            return Phase.HIT
        if self.missed:
            return Phase.MISSED
        return Phase.AIMING

    @property
    def tank_position(self) -> Position:
        return Position(self.tank_column, self.terrain[self.tank_column])

    @property
    def target_position(self) -> Position:
        return Position(self.target_column, self.terrain[self.target_column])

    # ------------------------------------------------------------------
    # Transitions
    def apply(self, command: Command) -> Transition:
        command = Command(command)
        if command is Command.QUIT:
            return Transition(self, quit=True)
        if self.phase is not Phase.AIMING:
            return Transition(self)

        if command is Command.ANGLE_DECREASE:
            return Transition(replace(self, aim=self.aim.adjust_angle(-ANGLE_STEP)))
        if command is Command.ANGLE_INCREASE:
            return Transition(replace(self, aim=self.aim.adjust_angle(ANGLE_STEP)))
        if command is Command.POWER_INCREASE:
            return Transition(replace(self, aim=self.aim.adjust_power(POWER_STEP)))
        if command is Command.POWER_DECREASE:
            return Transition(replace(self, aim=self.aim.adjust_power(-POWER_STEP)))
        if command is Command.FIRE:
            logger.debug(
                "Fire: angle=%.1f power=%.1f from column %d",
                self.aim.angle,
                self.aim.power,
                self.tank_column,
            )
            fired = replace(
                self,
                simulating=True,
                elapsed=0.0,
                projectile=self.tank_position,
            )
            return Transition(fired, Schedule(EventKind.TICK, TICK_DELAY))
        raise ValueError(f"unknown command: {command!r}")

    def tick(self, gravity: float = GRAVITY) -> Transition:
        """Advance an in-flight shot; stale ticks leave the state untouched."""

        if not self.simulating:
            return Transition(self)

        step = simulate_step(
            self.terrain,
            self.tank_column,
            self.target_column,
            self.aim,
            self.elapsed,
            gravity,
        )
        if step.outcome is Outcome.FLYING:
            flying = replace(self, projectile=step.position, elapsed=step.elapsed)
            return Transition(flying, Schedule(EventKind.TICK, TICK_DELAY))
        if step.outcome is Outcome.HIT:
            logger.debug("Target hit at %s after t=%.1f", step.position, step.elapsed)
            hit = replace(
                self,
                projectile=step.position,
                elapsed=step.elapsed,
                simulating=False,
                hit=True,
            )
            return Transition(hit)

        logger.debug(
            "Shot missed (%s) at x=%.2f y=%.2f after t=%.1f",
            step.outcome.value,
            step.x,
            step.y,
            step.elapsed,
        )
        missed = replace(self, elapsed=step.elapsed, simulating=False, missed=True)
        return Transition(missed, Schedule(EventKind.RESET, RESET_DELAY))


def new_match(
    config: GameConfig,
    rng: random.Random,
    aim: Optional[Aim] = None,
) -> GameState:
    """Generate fresh terrain and spawn columns for a new match."""

    terrain = TerrainGenerator(config.terrain, rng).generate()
    tank_column = rng.randint(*config.tank_spawn)
    target_column = rng.randint(*config.target_spawn)
    if aim is None:
        aim = Aim(config.default_angle, config.default_power)
    logger.debug(
        "New match: tank at column %d, target at column %d", tank_column, target_column
    )
    return GameState(
        terrain=terrain,
        tank_column=tank_column,
        target_column=target_column,
        projectile=Position(tank_column, terrain[tank_column]),
        aim=aim,
    )


__all__ = [
    "Command",
    "EventKind",
    "GameState",
    "Phase",
    "Schedule",
    "Transition",
    "new_match",
]
