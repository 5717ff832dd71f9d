"""Core game logic for the artillery duel, independent of rendering."""

from artillery_game.core.config import GameConfig
from artillery_game.core.game import (
    Command,
    EventKind,
    GameState,
    Phase,
    Schedule,
    Transition,
    new_match,
)
from artillery_game.core.projectile import (
    Aim,
    Outcome,
    Position,
    ProjectileSimulator,
    ProjectileStep,
)
from artillery_game.core.session import GameSession, ScheduledEvent
from artillery_game.core.terrain import TerrainGenerator, TerrainSettings

__all__ = [
    "Aim",
    "Command",
    "EventKind",
    "GameConfig",
    "GameSession",
    "GameState",
    "Outcome",
    "Phase",
    "Position",
    "ProjectileSimulator",
    "ProjectileStep",
    "Schedule",
    "ScheduledEvent",
    "TerrainGenerator",
    "TerrainSettings",
    "Transition",
    "new_match",
]
