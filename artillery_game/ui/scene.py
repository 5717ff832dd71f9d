"""Turn a match snapshot into a grid of styled characters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from artillery_game.core.game import GameState, Phase

PROJECTILE_GLYPH = "O"
TANK_GLYPH = "T"
TARGET_GLYPH = "X"
GROUND_GLYPH = "|"
BLANK_GLYPH = " "


@dataclass(frozen=True)
class Style:
    """A foreground colour as an xterm-256 index plus its RGB equivalent."""

    color: int
    rgb: Tuple[int, int, int]
    bold: bool = False


@dataclass(frozen=True)
class Palette:
    terrain: Style = Style(63, (95, 95, 255))
    tank: Style = Style(205, (255, 95, 175), bold=True)
    target: Style = Style(1, (128, 0, 0), bold=True)
    projectile: Style = Style(214, (255, 175, 0), bold=True)
    header: Style = Style(7, (192, 192, 192), bold=True)


DEFAULT_PALETTE = Palette()


@dataclass(frozen=True)
class Cell:
    char: str
    style: Optional[Style] = None


def build_grid(
    state: GameState,
    palette: Palette = DEFAULT_PALETTE,
    rows: int = 31,
) -> List[List[Cell]]:
    """Lay the match out top row first, one cell per terrain column.

    Row ``y`` of the result shows height ``rows - 1 - y``. The projectile is
    only drawn once a shot has left the barrel.
    """

    show_projectile = state.phase is not Phase.AIMING
    projectile = state.projectile
    grid: List[List[Cell]] = []
    for y in range(rows - 1, -1, -1):
        row: List[Cell] = []
        for x, height in enumerate(state.terrain):
            if show_projectile and x == projectile.column and y == projectile.height:
                row.append(Cell(PROJECTILE_GLYPH, palette.projectile))
            elif x == state.tank_column and height == y:
                row.append(Cell(TANK_GLYPH, palette.tank))
            elif x == state.target_column and height == y:
                row.append(Cell(TARGET_GLYPH, palette.target))
            elif height >= y:
                row.append(Cell(GROUND_GLYPH, palette.terrain))
            else:
                row.append(Cell(BLANK_GLYPH))
        grid.append(row)
    return grid


def status_line(state: GameState) -> str:
    return (
        f"Angle: {state.aim.angle:.1f}° | Power: {state.aim.power:.1f}"
        " | Press 'q' to quit"
    )


def banner(state: GameState) -> Optional[str]:
    phase = state.phase
    if phase is Phase.HIT:
        return "You hit the target! Press 'q' to quit."
    if phase is Phase.MISSED:
        return "Missed! Game restarting..."
    return None


def render_text(state: GameState, rows: int = 31) -> str:
    """Plain-text rendering of the full view, without colours."""

    lines = [status_line(state)]
    message = banner(state)
    if message:
        lines.append(message)
    for row in build_grid(state, rows=rows):
        lines.append("".join(cell.char for cell in row))
    return "\n".join(lines)


__all__ = [
    "Cell",
    "DEFAULT_PALETTE",
    "Palette",
    "Style",
    "banner",
    "build_grid",
    "render_text",
    "status_line",
]
