"""Pygame-powered presentation layer drawing the duel's character grid."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the windowed version of the duel."
    ) from exc

from artillery_game.core.session import GameSession
from artillery_game.ui import FrontendError
from artillery_game.ui.input import DEFAULT_BINDINGS, KeyBindings
from artillery_game.ui.scene import (
    DEFAULT_PALETTE,
    Palette,
    Style,
    banner,
    build_grid,
    status_line,
)

logger = logging.getLogger(__name__)

_KEY_ALIASES = {
    "return": "enter",
}


def pygame_key_name(event: pygame.event.Event) -> str:
    name = pygame.key.name(event.key)
    return _KEY_ALIASES.get(name, name)


class PygameArtillery:
    """Windowed client rendering the same grid the terminal shows."""

    def __init__(
        self,
        session: GameSession,
        *,
        bindings: KeyBindings = DEFAULT_BINDINGS,
        palette: Palette = DEFAULT_PALETTE,
        font_size: int = 18,
        fps: int = 30,
        background: Tuple[int, int, int] = (12, 14, 22),
    ) -> None:
        self.session = session
        self.bindings = bindings
        self.palette = palette
        self.fps = fps
        self.background = pygame.Color(*background)
        self.text_color = pygame.Color(230, 230, 230)

        try:
            pygame.display.init()
            pygame.font.init()
            self.font = pygame.font.Font(None, font_size)
            self.bold_font = pygame.font.Font(None, font_size)
            self.bold_font.set_bold(True)
            self.cell_width, self.cell_height = self.font.size("M")
            self.header_lines = 2
            columns = session.state.width
            rows = session.config.display_rows + self.header_lines
            self.screen = pygame.display.set_mode(
                (columns * self.cell_width, rows * self.cell_height)
            )
        except pygame.error as exc:
            raise FrontendError(f"display unavailable: {exc}") from exc
        pygame.display.set_caption("Artillery Duel")
        self.clock = pygame.time.Clock()
        self._glyphs: Dict[Tuple[str, Style], pygame.Surface] = {}

    # ------------------------------------------------------------------
    def run(self) -> None:
        try:
            while self.session.running:
                dt = self.clock.tick(self.fps) / 1000.0
                for event in pygame.event.get():
                    self.process_event(event)
                self.session.advance(dt)
                self.draw()
                pygame.display.flip()
        finally:
            pygame.quit()

    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.session.running = False
            return
        if event.type != pygame.KEYDOWN:
            return
        command = self.bindings.command_for(pygame_key_name(event))
        if command is None:
            return
        logger.debug("Key event -> %s", command.value)
        self.session.handle(command)

    def draw(self) -> None:
        state = self.session.state
        self.screen.fill(self.background)
        header = self.palette.header
        self._blit_text(status_line(state), 0, pygame.Color(*header.rgb), bold=header.bold)
        message = banner(state) or self.bindings.help_text()
        self._blit_text(message, 1, self.text_color)

        grid = build_grid(state, self.palette, rows=self.session.config.display_rows)
        for row_index, row in enumerate(grid):
            top = (row_index + self.header_lines) * self.cell_height
            for column, cell in enumerate(row):
                if cell.style is None:
                    continue
                glyph = self._glyph(cell.char, cell.style)
                self.screen.blit(glyph, (column * self.cell_width, top))

    # ------------------------------------------------------------------
    # Internal helpers
    def _glyph(self, char: str, style: Style) -> pygame.Surface:
        key = (char, style)
        surface = self._glyphs.get(key)
        if surface is None:
            font = self.bold_font if style.bold else self.font
            surface = font.render(char, True, pygame.Color(*style.rgb))
            self._glyphs[key] = surface
        return surface

    def _blit_text(
        self, text: str, line: int, color: pygame.Color, bold: bool = False
    ) -> None:
        font = self.bold_font if bold else self.font
        surface = font.render(text, True, color)
        self.screen.blit(surface, (0, line * self.cell_height))


def run_pygame(session: GameSession, **kwargs) -> None:
    """Open a window and play until the player quits or closes it."""

    try:
        app = PygameArtillery(session, **kwargs)
    except FrontendError:
        pygame.quit()
        raise
    app.run()


__all__ = ["PygameArtillery", "pygame_key_name", "run_pygame"]
