"""Curses front-end for the artillery duel."""

from artillery_game.terminal.app import TerminalArtillery, key_name, run_terminal

__all__ = ["TerminalArtillery", "key_name", "run_terminal"]
