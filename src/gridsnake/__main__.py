from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake on a fixed-tick loop.")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=config.HIGH_SCORE_PATH,
        help="Where the high score is kept (default: %(default)s).",
    )
    parser.add_argument("--no-save", action="store_true", help="Keep the high score in memory only.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frame rate cap for drawing.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every food pickup.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported late so --help works without opening a window.
    from .game import main as run_game

    return run_game(high_score_file=args.high_score_file, save=not args.no_save, fps=max(1, args.fps))


if __name__ == "__main__":
    sys.exit(main())
