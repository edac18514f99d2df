"""Command-line entry point: validate a map file and play it."""

from __future__ import annotations

import sys

from solong.errors import SoLongError
from solong.game import Game
from solong.mapfile import check_arguments, load_map
from solong.render import DEFAULT_SPRITE_DIR, run

BONUS_FLAG = "--bonus"


def main(argv=None):
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    try:
        path = check_arguments(args)
        game_map = load_map(path, bonus)
        run(Game(game_map, bonus), DEFAULT_SPRITE_DIR)
    except SoLongError as exc:
        print(exc.message, end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())