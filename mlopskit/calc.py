"""Calculator functions on 32-bit signed integers and a web service exposing them."""

from __future__ import annotations

import argparse
import re
from typing import Callable

from flask import Flask, abort

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _checked(value: int) -> int:
    if not I32_MIN <= value <= I32_MAX:
        raise OverflowError(f"result {value} does not fit in a 32-bit signed integer")
    return value


def add(a: int, b: int) -> int:
    """Add two numbers."""
    return _checked(a + b)


def subtract(a: int, b: int) -> int:
    """Subtract b from a."""
    return _checked(a - b)


def multiply(a: int, b: int) -> int:
    """Multiply two numbers."""
    return _checked(a * b)


def divide(a: int, b: int) -> int:
    """Divide a by b, truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return _checked(quotient)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def _parse_operand(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        abort(404)
    value = int(raw)
    if not I32_MIN <= value <= I32_MAX:
        abort(404)
    return value


def _text(app: Flask, body: str, status: int = 200):
    return app.response_class(body, status=status, mimetype="text/plain")


def create_app() -> Flask:
    """Build the calculator web application."""
    app = Flask(__name__)

    @app.get("/")
    def index():
        return _text(app, "This is a calculator microservice")

    def make_view(operation: Callable[[int, int], int]):
        def view(a: str, b: str):
            return _text(app, str(operation(_parse_operand(a), _parse_operand(b))))

        return view

    for name, operation in _OPERATIONS.items():
        app.add_url_rule(f"/{name}/<a>/<b>", endpoint=name, view_func=make_view(operation))

    @app.errorhandler(ArithmeticError)
    def arithmetic_failed(error: ArithmeticError):
        return _text(app, str(error), 500)

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="calc", description="Calculator microservice")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())