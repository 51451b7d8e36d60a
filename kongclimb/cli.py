"""Command line entry point: play, record with -save, or replay with -load."""

from __future__ import annotations

import sys

from kongclimb.console import RawTerminal
from kongclimb.interactive import DonkeyGame
from kongclimb.replay import ReplayGame


def main(argv=None) -> int:
    """Start the game mode chosen by the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    first = args[0] if args else ""
    is_load = first == "-load"
    is_save = first == "-save"
    is_silent = is_load and len(args) > 1 and args[1] == "-silent"

    game = ReplayGame(is_silent) if is_load else DonkeyGame(is_save)
    with RawTerminal():
        try:
            game.start()
        except (EOFError, KeyboardInterrupt):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())