"""Serverless function handlers that take a JSON-like event and a context."""

from __future__ import annotations

import logging
import os
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Mapping

from mlopskit.dedupe import checksum_parallel, find_duplicates

EFS_MOUNT = "/mnt/efs"
TESTFILES_DIRECTORY = "/efs/testfiles/"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LambdaContext:
    """The invocation context handed to every handler."""

    aws_request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    function_name: str = ""


def _field(event: Mapping[str, Any], key: str) -> str:
    """Fetch a required string field from an event, as the request schema demands."""
    if key not in event:
        raise ValueError(f"missing field `{key}`")
    value = event[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {type(value).__name__}")
    return value


def _wrap_i32(value: int) -> int:
    """Reduce an integer to a 32-bit signed value with two's complement wrap-around."""
    return (value + 2**31) % 2**32 - 2**31


def marco_polo_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Reply "Polo" to "Marco" and "Who?" to anyone else."""
    name = _field(event, "name")
    answer = "Polo" if name == "Marco" else "Who?"
    return {"req_id": context.aws_request_id, "msg": f"{name} says {answer}"}


def command_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Echo the command back."""
    command = _field(event, "command")
    return {"req_id": context.aws_request_id, "msg": f"Command {command}."}


def command_executed_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Report the command as executed."""
    command = _field(event, "command")
    return {"req_id": context.aws_request_id, "msg": f"Command {command} executed."}


def step_marco_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """First step of a state machine: "Marco" becomes "Polo", anything else "Nobody"."""
    name = _field(event, "name")
    payload = "Polo" if name == "Marco" else "Nobody"
    logger.info("name %s", name)
    return {"req_id": context.aws_request_id, "payload": payload}


def step_polo_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Second step of a state machine: a "Polo" payload wins, anything else loses."""
    name = _field(event, "payload")
    payload = "YouWin!" if name == "Polo" else "YouLose"
    logger.info("name %s", name)
    return {"req_id": context.aws_request_id, "payload": payload}


def heavy_compute_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Run ten rounds of a summation and report each round's 32-bit result."""
    name = _field(event, "name")
    lines = []
    for iteration in range(1, 11):
        logger.info("Starting computation %d", iteration)
        computation = _wrap_i32(sum(range(1_000_000)))
        logger.info("Finished computation %d", iteration)
        lines.append(f"Iteration {iteration}: {computation}\n")
    return {"req_id": context.aws_request_id, "msg": f"{name} says {''.join(lines)}"}


def parallel_sum() -> int:
    """Sum 0..99 in chunks on worker threads, print it and return it."""
    numbers = list(range(100))
    chunks = [numbers[start : start + 10] for start in range(0, len(numbers), 10)]
    with ThreadPoolExecutor() as pool:
        total = sum(pool.map(sum, chunks))
    print(f"Sum: {total} Thread ID: {threading.get_ident()}")
    return total


def threads_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Echo the command and run the threaded summation as a benchmark."""
    command = _field(event, "command")
    response = {"req_id": context.aws_request_id, "msg": f"Command {command}."}
    benchmark = parallel_sum()
    print(f"Benchmark: {benchmark}")
    return response


def list_files(directory: str | os.PathLike[str]) -> str:
    """List the regular files directly inside a directory, each preceded by a blank line."""
    with os.scandir(directory) as entries:
        paths = sorted(
            os.path.join(os.fspath(directory), entry.name)
            for entry in entries
            if entry.is_file()
        )
    return "".join(f"\n\n{path}" for path in paths)


def efs_lister_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Greet the caller and list the files on the mounted volume."""
    name = _field(event, "name")
    files = list_files(os.environ.get("EFS_MOUNT", EFS_MOUNT))
    return {"req_id": context.aws_request_id, "msg": f"Hello, {name}!", "files": files}


def run_duplicate_search(directory: str | os.PathLike[str]) -> list[list[str]]:
    """Checksum every entry directly inside a directory and return groups of duplicates."""
    with os.scandir(directory) as entries:
        paths = [os.path.join(os.fspath(directory), entry.name) for entry in entries]
    return find_duplicates(checksum_parallel(paths))


def checksum_handler(event: Mapping[str, Any], context: LambdaContext) -> dict[str, str]:
    """Run the duplicate search over the test files directory and echo the command."""
    command = _field(event, "command")
    run_duplicate_search(os.environ.get("TESTFILES_DIRECTORY", TESTFILES_DIRECTORY))
    return {"req_id": context.aws_request_id, "msg": f"Command {command}."}