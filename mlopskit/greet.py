"""A command-line tool that greets someone by name."""

from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greet", description="hello world")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")
    greet = commands.add_parser("greet", help="greet someone")
    greet.add_argument("-n", "--name", required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "greet":
        print(f"Hello, {args.name}!")
    else:
        print("No subcommand was used")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())