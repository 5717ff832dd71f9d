"""Ballistic projectile stepping and collision against a terrain profile."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

from artillery_game.core.terrain import round_half_away

GRAVITY = 9.81
TIME_STEP = 0.1
HIT_COLUMNS = 3
HIT_ROWS = 2


@dataclass(frozen=True)
class Position:
    """A discrete cell in the terrain grid."""

    column: int
    height: int


@dataclass(frozen=True)
class Aim:
    """Launch angle in degrees and muzzle power."""

    angle: float = 45.0
    power: float = 20.0

    def adjust_angle(self, delta: float) -> "Aim":
        return replace(self, angle=self.angle + delta)

    def adjust_power(self, delta: float) -> "Aim":
        return replace(self, power=self.power + delta)


class Outcome(Enum):
    FLYING = "flying"
    HIT = "hit"
    GROUND = "ground"
    OUT_OF_BOUNDS = "out_of_bounds"

    @property
    def is_miss(self) -> bool:
        return self in (Outcome.GROUND, Outcome.OUT_OF_BOUNDS)

    @property
    def terminal(self) -> bool:
        return self is not Outcome.FLYING


@dataclass(frozen=True)
class ProjectileStep:
    """Result of advancing a shot by one tick."""

    outcome: Outcome
    elapsed: float
    x: float
    y: float
    position: Optional[Position] = None


def trajectory_point(
    launch: Position, aim: Aim, t: float, gravity: float = GRAVITY
) -> Tuple[float, float]:
    """Return the exact ``(x, y)`` of a shot ``t`` time units after launch."""

    angle_rad = math.radians(aim.angle)
    x = launch.column + aim.power * math.cos(angle_rad) * t
    y = launch.height + aim.power * math.sin(angle_rad) * t - 0.5 * gravity * t * t
    return x, y


def simulate_step(
    terrain: Sequence[int],
    launch_column: int,
    target_column: int,
    aim: Aim,
    elapsed: float,
    gravity: float = GRAVITY,
) -> ProjectileStep:
    """Advance a shot by one tick and classify where it ends up.

    Positions are always recomputed from the launch point. Leaving the
    terrain horizontally or touching the ground is a miss; the ground test
    runs before the target test, so a shell buried next to the target still
    misses.
    """

    elapsed += TIME_STEP
    launch = Position(launch_column, terrain[launch_column])
    x, y = trajectory_point(launch, aim, elapsed, gravity)

    column = round_half_away(x)
    if not 0 <= column < len(terrain):
        return ProjectileStep(Outcome.OUT_OF_BOUNDS, elapsed, x, y)
    if y <= terrain[column]:
        return ProjectileStep(Outcome.GROUND, elapsed, x, y)

    position = Position(column, round_half_away(y))
    target_height = terrain[target_column]
    if (
        abs(target_column - column) <= HIT_COLUMNS
        and abs(position.height - target_height) <= HIT_ROWS
    ):
        return ProjectileStep(Outcome.HIT, elapsed, x, y, position)
    return ProjectileStep(Outcome.FLYING, elapsed, x, y, position)


class ProjectileSimulator:
    """Bind a terrain, a launcher and a target for repeated stepping."""

    def __init__(
        self,
        terrain: Sequence[int],
        launch_column: int,
        target_column: int,
        gravity: float = GRAVITY,
    ) -> None:
        if not 0 <= launch_column < len(terrain):
            raise ValueError(f"launch column {launch_column} is off the terrain")
        if not 0 <= target_column < len(terrain):
            raise ValueError(f"target column {target_column} is off the terrain")
        self.terrain = tuple(terrain)
        self.launch_column = launch_column
        self.target_column = target_column
        self.gravity = gravity

    def step(self, aim: Aim, elapsed: float) -> ProjectileStep:
        return simulate_step(
            self.terrain,
            self.launch_column,
            self.target_column,
            aim,
            elapsed,
            self.gravity,
        )

    def run(self, aim: Aim, max_steps: int = 10_000) -> Iterator[ProjectileStep]:
        """Yield every tick of a shot up to and including the terminal one."""

        elapsed = 0.0
        for _ in range(max_steps):
            step = self.step(aim, elapsed)
            yield step
            if step.outcome.terminal:
                return
            elapsed = step.elapsed
        raise RuntimeError(f"shot did not land within {max_steps} ticks")


__all__ = [
    "Aim",
    "GRAVITY",
    "HIT_COLUMNS",
    "HIT_ROWS",
    "Outcome",
    "Position",
    "ProjectileSimulator",
    "ProjectileStep",
    "TIME_STEP",
    "simulate_step",
    "trajectory_point",
]
