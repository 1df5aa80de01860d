"""Prints a greeting."""

from __future__ import annotations

import argparse

GREETING = "Hello, world MLOPs!"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hello", description="Prints a greeting")
    parser.parse_args(argv)
    print(GREETING)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())