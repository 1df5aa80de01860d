"""Compare serial and parallel duplicate file searches."""

from __future__ import annotations

import argparse

from mlopskit.dedupe import checksum, checksum_parallel, walk

DEFAULT_PATH = "src/data/"


def _report(groups: dict[str, list[str]]) -> None:
    for digest, files in groups.items():
        if len(files) > 1:
            print(f"{digest}:")
            for path in files:
                print(f"\t{path}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="parallel",
        description="Compares serial and parallel versions of the program",
        epilog="Example: parallel parallel --path /src/data/",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")
    for name in ("parallel", "serial"):
        command = commands.add_parser(name)
        command.add_argument("-p", "--path", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    if args.command == "parallel":
        print("Parallel version of the program")
        _report(checksum_parallel(walk(args.path)))
    elif args.command == "serial":
        print("Serial version of the program")
        _report(checksum(walk(args.path)))
    else:
        print("No command specified")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())