"""Top-level package for the artillery duel game."""

__version__ = "1.0.0"

from artillery_game.core import (
    Aim,
    Command,
    GameConfig,
    GameSession,
    GameState,
    Phase,
    Position,
    ProjectileSimulator,
    TerrainGenerator,
    TerrainSettings,
)

__all__ = [
    "Aim",
    "Command",
    "GameConfig",
    "GameSession",
    "GameState",
    "Phase",
    "Position",
    "ProjectileSimulator",
    "TerrainGenerator",
    "TerrainSettings",
]

__all__.append("__version__")
