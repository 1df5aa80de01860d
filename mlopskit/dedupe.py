"""Find files with identical contents under a directory tree."""

from __future__ import annotations

import argparse
import hashlib
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable


def walk(path: str) -> list[str]:
    """Return every regular file under path, or path itself if it is a file."""
    if os.path.isfile(path) and not os.path.islink(path):
        return [path]

    errors: list[OSError] = []
    files = []
    for dirpath, _dirnames, filenames in os.walk(path, onerror=errors.append):
        if errors:
            break
        for name in filenames:
            full = os.path.join(dirpath, name)
            if os.path.isfile(full) and not os.path.islink(full):
                files.append(full)
    if errors:
        raise errors[0]
    return files


def _md5_of(path: str) -> str:
    with open(path, "rb") as handle:
        return hashlib.md5(handle.read()).hexdigest()


def _group(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    groups: dict[str, list[str]] = defaultdict(list)
    for digest, path in pairs:
        groups[digest].append(path)
    return dict(groups)


def checksum(files: Iterable[str]) -> dict[str, list[str]]:
    """Group files by the MD5 digest of their contents."""
    return _group((_md5_of(path), path) for path in files)


def checksum_parallel(files: Iterable[str]) -> dict[str, list[str]]:
    """Group files by MD5 digest, reading and hashing them on worker threads."""
    paths = list(files)
    with ThreadPoolExecutor() as pool:
        digests = list(pool.map(_md5_of, paths))
    return _group(zip(digests, paths))


def find_duplicates(checksums: dict[str, list[str]]) -> list[list[str]]:
    """Return the groups that hold more than one file."""
    return [files for files in checksums.values() if len(files) > 1]


def _debug(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="deduper", description="Finds duplicate files on the filesystem"
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    parser.add_argument("--path", required=True)
    args = parser.parse_args(argv)

    print(f"Searching path: {_debug(args.path)}")
    files = walk(args.path)
    print(f"Found {len(files)} files")
    duplicates = find_duplicates(checksum(files))
    print(f"Found {len(duplicates)} duplicates")
    for group in duplicates:
        print(f"Duplicate files: [{', '.join(_debug(p) for p in group)}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())