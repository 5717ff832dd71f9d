"""Allow ``python -m artillery_game``."""

import sys

from artillery_game.cli import main

sys.exit(main())
