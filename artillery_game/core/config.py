"""Match configuration shared by the core and the front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from artillery_game.core.projectile import GRAVITY
from artillery_game.core.terrain import TerrainSettings

TICK_DELAY = 0.1
RESET_DELAY = 2.0
ANGLE_STEP = 5.0
POWER_STEP = 1.0


@dataclass(frozen=True)
class GameConfig:
    """Validated settings for a match.

    Spawn ranges are inclusive column bounds; the tank and target ranges may
    not overlap so the two can never share a column.
    """

    terrain: TerrainSettings = field(default_factory=TerrainSettings)
    gravity: float = GRAVITY
    tank_spawn: Tuple[int, int] = (1, 5)
    target_spawn: Tuple[int, int] = (75, 79)
    default_angle: float = 45.0
    default_power: float = 20.0
    preserve_aim: bool = False
    display_rows: int = 31
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.display_rows < 1:
            raise ValueError("display needs at least one row")
        width = self.terrain.width
        for name, (low, high) in (
            ("tank_spawn", self.tank_spawn),
            ("target_spawn", self.target_spawn),
        ):
            if low > high:
                raise ValueError(f"{name} range is empty: {low}..{high}")
            if low < 0 or high >= width:
                raise ValueError(
                    f"{name} range {low}..{high} does not fit a terrain {width} wide"
                )
        tank_low, tank_high = self.tank_spawn
        target_low, target_high = self.target_spawn
        if tank_low <= target_high and target_low <= tank_high:
            raise ValueError("tank and target spawn ranges overlap")


__all__ = ["ANGLE_STEP", "GameConfig", "POWER_STEP", "RESET_DELAY", "TICK_DELAY"]
