"""A command-line tool that logs a random fruit at several levels."""

from __future__ import annotations

import argparse
import logging
import random
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

FRUITS = ("apple", "banana", "orange", "pear", "strawberry")

LEVELS = {
    "info": logging.INFO,
    "trace": TRACE,
    "warn": logging.WARNING,
}

logger = logging.getLogger(__name__)


def random_fruit() -> str:
    """Pick a fruit at random and log it at info, trace and warning level."""
    fruit = random.choice(FRUITS)
    logger.info("fruit-info: %s", fruit)
    logger.log(TRACE, "fruit-trace: %s", fruit)
    logger.warning("fruit-warn: %s", fruit)
    return fruit


def _configure(level: int) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s %(name)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fruit-logger", description="logs random fruits")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    parser.add_argument("--level", required=True)
    args = parser.parse_args(argv)
    _configure(LEVELS.get(args.level.lower(), logging.INFO))
    random_fruit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())