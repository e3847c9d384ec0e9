from __future__ import annotations

import argparse
import logging

from . import config
from .game import run
from .highscore import HighScoreStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play Snake on a 20x20 grid.")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=config.TICK_MS,
        help="Milliseconds between snake moves.",
    )
    parser.add_argument(
        "--high-score-file",
        default=None,
        help=f"JSON file holding the high score (default: {config.HIGH_SCORE_FILE}).",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    args = parser.parse_args(argv)

    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args.tick_ms, HighScoreStore(args.high_score_file), args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
