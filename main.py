"""Entry point for playing the artillery duel."""

import sys

from artillery_game.cli import main

if __name__ == "__main__":
    sys.exit(main())
