"""Read song lyrics and list genre labels kept in an in-memory database."""

from __future__ import annotations

import argparse
import sqlite3
from contextlib import closing

DEFAULT_FILE = "lyrics.txt"
CANDIDATES = ("rock", "pop", "hip hop", "country", "latin")


def _create_db() -> sqlite3.Connection:
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE zeroshotcandidates (id INTEGER PRIMARY KEY, label TEXT)")
    db.executemany(
        "INSERT INTO zeroshotcandidates (label) VALUES (?)",
        ((label,) for label in CANDIDATES),
    )
    return db


def get_all_zeroshotcandidates() -> list[str]:
    """Return every candidate label stored in the database."""
    with closing(_create_db()) as db:
        return [label for (label,) in db.execute("SELECT label FROM zeroshotcandidates")]


def read_lyrics(path: str) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlitehf",
        description="A command-line tool to analyze lyrics to songs and put them into a sqlite database.",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("candidates", help="list the candidate labels")
    lyrics = commands.add_parser("lyrics", help="print the lyrics of a file")
    lyrics.add_argument("-f", "--file", default=DEFAULT_FILE)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "candidates":
        for candidate in get_all_zeroshotcandidates():
            print(candidate)
    elif args.command == "lyrics":
        print(f"Lyrics {args.file}")
        for line in read_lyrics(args.file):
            print(line)
    else:
        print("No command given")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())