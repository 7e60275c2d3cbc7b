from __future__ import annotations

import argparse
import logging

from .config import log_level
from .game import TicTacToe

DIST_NAME = "tictactoe-console"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tictactoe",
        description=(
            "Two-player tic-tac-toe on the console. Squares are numbered 0 to 8, row by row. "
            "Run without arguments to play one game; the flags below only affect diagnostics."
        ),
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else log_level(),
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver(DIST_NAME))
        except PackageNotFoundError:
            print("unknown")
        return 0

    try:
        TicTacToe().play_game()
    except EOFError:
        logging.error("Input closed before the game finished.")
        return 1
    except KeyboardInterrupt:
        logging.error("Game interrupted.")
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
