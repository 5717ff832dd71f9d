"""Curses front-end that draws the duel in a text terminal."""

from __future__ import annotations

import curses
import logging
import time
from typing import Callable, Dict, Optional

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

_NAMED_KEYS = {
    curses.KEY_ENTER: "enter",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    10: "enter",
    13: "enter",
}

# Closest basic colours for terminals without 256-colour support.
_BASIC_FALLBACK = {
    63: curses.COLOR_BLUE,
    205: curses.COLOR_MAGENTA,
    1: curses.COLOR_RED,
    214: curses.COLOR_YELLOW,
    7: curses.COLOR_WHITE,
}


def key_name(key: int) -> Optional[str]:
    """Translate a curses key code into a binding key name."""

    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if 32 <= key < 127:
        return chr(key).lower()
    return None


class TerminalArtillery:
    """Drive a :class:`GameSession` from a curses screen."""

    def __init__(
        self,
        session: GameSession,
        *,
        bindings: KeyBindings = DEFAULT_BINDINGS,
        palette: Palette = DEFAULT_PALETTE,
        frame_delay: float = 0.02,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self.bindings = bindings
        self.palette = palette
        self.frame_delay = frame_delay
        self._clock = clock
        self._attrs: Dict[Style, int] = {}

    # ------------------------------------------------------------------
    def run(self, screen) -> None:
        self._setup_screen(screen)
        last = self._clock()
        while self.session.running:
            key = screen.getch()
            if key != -1:
                self.handle_key(key)
            now = self._clock()
            self.session.advance(max(0.0, now - last))
            last = now
            self.draw(screen)

    def handle_key(self, key: int) -> None:
        name = key_name(key)
        if name is None:
            return
        command = self.bindings.command_for(name)
        if command is None:
            return
        logger.debug("Key %r -> %s", name, command.value)
        self.session.handle(command)

    def draw(self, screen) -> None:
        state = self.session.state
        max_y, max_x = screen.getmaxyx()
        screen.erase()
        lines = [(status_line(state), self._attr(self.palette.header))]
        message = banner(state)
        lines.append((message or self.bindings.help_text(), 0))
        for y, (text, attr) in enumerate(lines):
            self._put(screen, y, 0, text[: max_x - 1], attr, max_y)

        top = len(lines)
        grid = build_grid(state, self.palette, rows=self.session.config.display_rows)
        for offset, row in enumerate(grid):
            y = top + offset
            if y >= max_y:
                break
            for x, cell in enumerate(row[: max_x - 1]):
                if cell.style is None:
                    continue
                self._put(screen, y, x, cell.char, self._attr(cell.style), max_y)
        screen.refresh()

    # ------------------------------------------------------------------
    # Internal helpers
    def _setup_screen(self, screen) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        screen.nodelay(False)
        screen.timeout(max(1, int(self.frame_delay * 1000)))
        screen.keypad(True)
        if curses.has_colors():
            self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        rich = curses.COLORS >= 256
        styles = [
            self.palette.terrain,
            self.palette.tank,
            self.palette.target,
            self.palette.projectile,
            self.palette.header,
        ]
        for pair, style in enumerate(styles, start=1):
            color = style.color if rich else _BASIC_FALLBACK.get(style.color, curses.COLOR_WHITE)
            curses.init_pair(pair, color, background)
            attr = curses.color_pair(pair)
            if style.bold:
                attr |= curses.A_BOLD
            self._attrs[style] = attr

    def _attr(self, style: Style) -> int:
        if style in self._attrs:
            return self._attrs[style]
        return curses.A_BOLD if style.bold else 0

    @staticmethod
    def _put(screen, y: int, x: int, text: str, attr: int, max_y: int) -> None:
        if y >= max_y or not text:
            return
        try:
            screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass


def run_terminal(session: GameSession, **kwargs) -> None:
    """Run the curses front-end until the player quits."""

    app = TerminalArtillery(session, **kwargs)
    try:
        curses.wrapper(app.run)
    except curses.error as exc:
        raise FrontendError(f"terminal unavailable: {exc}") from exc


__all__ = ["TerminalArtillery", "key_name", "run_terminal"]
