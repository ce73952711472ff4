"""Command-line entry point for the terminal game."""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from pydantic import ValidationError

from rps.app import build_app, run
from rps.config import GameConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rps", description="Play Rock-Paper-Scissors against the computer.")
    p.add_argument("--seed", type=int, default=None, help="Seed the computer's moves (default: unseeded)")
    p.add_argument("--max-attempts", type=int, default=4, help="Bad moves allowed before giving up (default: 4)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p


def load_config(argv: list[str] | None = None) -> GameConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return GameConfig(max_attempts=args.max_attempts, seed=args.seed, verbose=args.verbose)
    except ValidationError as e:
        parser.error(f"invalid settings: {e.errors()[0]['loc'][0]}: {e.errors()[0]['msg']}")


def main(argv: Optional[list[str]] = None) -> int:
    config = load_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(build_app(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
