"""Pygame window front-end for the artillery duel."""

from artillery_game.pygame.app import PygameArtillery, run_pygame

__all__ = ["PygameArtillery", "run_pygame"]
