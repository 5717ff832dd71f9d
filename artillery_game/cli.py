"""Command-line entry point for the artillery duel."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from artillery_game.core.config import GameConfig
from artillery_game.core.projectile import GRAVITY
from artillery_game.core.session import GameSession
from artillery_game.core.terrain import TerrainSettings
from artillery_game.ui import FrontendError

TERMINAL_LOG_FILE = "artillery-duel.log"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal artillery duel")
    parser.add_argument("--seed", type=int, default=None, help="seed for terrain and spawns")
    parser.add_argument("--gravity", type=float, default=GRAVITY, help="gravitational pull")
    parser.add_argument("--octaves", type=int, default=6, help="terrain detail octaves")
    parser.add_argument(
        "--keep-aim",
        action="store_true",
        help="keep angle and power when a miss restarts the match",
    )
    parser.add_argument(
        "--frontend",
        choices=("terminal", "pygame"),
        default="terminal",
        help="draw in the terminal (default) or in a pygame window",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log additional debug information",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help=f"write log output to this file (terminal default: {TERMINAL_LOG_FILE})",
    )
    return parser


def log_handler(log_file: Optional[str], frontend: str) -> logging.Handler:
    """Send log records to a file whenever curses owns the terminal."""

    if log_file is None and frontend == "terminal":
        log_file = TERMINAL_LOG_FILE
    if log_file is None:
        return logging.StreamHandler()
    # The file is only created once something is actually logged.
    return logging.FileHandler(log_file, encoding="utf-8", delay=True)


def configure_logging(
    debug: bool, log_file: Optional[str], frontend: str = "terminal"
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        handlers=[log_handler(log_file, frontend)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_frontend(name: str) -> Callable[[GameSession], None]:
    if name == "pygame":
        try:
            from artillery_game.pygame import run_pygame
        except RuntimeError as exc:
            raise FrontendError(str(exc)) from exc
        return run_pygame
    from artillery_game.terminal import run_terminal

    return run_terminal


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug, args.log_file, args.frontend)
    try:
        config = GameConfig(
            terrain=TerrainSettings(octaves=args.octaves),
            gravity=args.gravity,
            preserve_aim=args.keep_aim,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2

    session = GameSession(config)
    try:
        load_frontend(args.frontend)(session)
    except FrontendError as exc:
        print(f"Error starting game: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


