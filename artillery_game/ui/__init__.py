"""Presentation helpers shared by the terminal and pygame front-ends."""

from artillery_game.ui.input import DEFAULT_BINDINGS, KeyBindings
from artillery_game.ui.scene import (
    DEFAULT_PALETTE,
    Cell,
    Palette,
    Style,
    banner,
    build_grid,
    render_text,
    status_line,
)


class FrontendError(RuntimeError):
    """Raised when a front-end cannot take over the display."""


__all__ = [
    "Cell",
    "DEFAULT_BINDINGS",
    "DEFAULT_PALETTE",
    "FrontendError",
    "KeyBindings",
    "Palette",
    "Style",
    "banner",
    "build_grid",
    "render_text",
    "status_line",
]
