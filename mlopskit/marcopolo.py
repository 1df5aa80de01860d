"""A Marco Polo game played from the command line."""

from __future__ import annotations

import argparse


def marco_polo(name: str) -> str:
    """Answer "Polo" to "Marco" and "Marco" to anything else."""
    match name:
        case "Marco":
            return "Polo"
        case _:
            return "Marco"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="marco_polo", description="A Marco Polo game")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")
    play = commands.add_parser("play", help="play one round")
    play.add_argument("-n", "--name", required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "play":
        print(marco_polo(args.name))
    else:
        print("No subcommand was used")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())