"""Inspect a CSV of yearly figures per country as a data frame."""

from __future__ import annotations

import argparse

import pandas as pd

CSV_FILE = "src/data/global-life-expt-2022.csv"
COUNTRY_COLUMN = "Country Name"


def read_csv(path: str) -> pd.DataFrame:
    """Read a CSV file into a data frame, keeping column names as text."""
    return pd.read_csv(path)


def print_df(df: pd.DataFrame, n: int) -> None:
    """Print the first n rows of a data frame."""
    print(df.head(n))


def print_schema(df: pd.DataFrame) -> None:
    """Print each column's name and type."""
    for name, dtype in df.dtypes.items():
        print(f"{name}: {dtype}")


def print_shape(df: pd.DataFrame) -> None:
    """Print the number of rows and columns."""
    print(df.shape)


def sort_by_year(df: pd.DataFrame, year: str, descending: bool = True) -> pd.DataFrame:
    """Keep the country and year columns, drop incomplete rows and sort by the year."""
    selected = df[[COUNTRY_COLUMN, year]].dropna()
    ordered = selected.sort_values(year, ascending=not descending, kind="stable")
    return ordered.reset_index(drop=True)


def _boolean(raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise argparse.ArgumentTypeError(f"invalid value '{raw}': expected true or false")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polarsdf",
        description=(
            "A command-line tool that reads a CSV file and prints "
            "the contents of the file as a DataFrame"
        ),
        epilog="Example: polarsdf print --rows 3",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")

    show = commands.add_parser("print", help="print the first rows")
    show.add_argument("--rows", type=int, default=10)
    describe = commands.add_parser("describe", help="print the whole frame")
    schema = commands.add_parser("schema", help="print column types")
    shape = commands.add_parser("shape", help="print rows and columns")
    sort = commands.add_parser("sort", help="sort countries by a year")
    sort.add_argument("--year", default="2020")
    sort.add_argument("--rows", type=int, default=10)
    sort.add_argument("--order", type=_boolean, default=True)

    for command in (show, describe, schema, shape, sort):
        command.add_argument("--path", default=CSV_FILE)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command is None:
        print("No subcommand was used")
        return 0

    df = read_csv(args.path)
    if args.command == "print":
        print_df(df, args.rows)
    elif args.command == "describe":
        print(df)
    elif args.command == "schema":
        print_schema(df)
    elif args.command == "shape":
        print_shape(df)
    elif args.command == "sort":
        print_df(sort_by_year(df, args.year, args.order), args.rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())