"""A random fruit picker and a web service that serves it."""

from __future__ import annotations

import argparse
import random

from flask import Flask

VERSION = "0.1.0"

FRUITS = (
    "Apple",
    "Banana",
    "Orange",
    "Pineapple",
    "Strawberry",
    "Watermelon",
    "Grapes",
    "Mango",
    "Papaya",
    "Kiwi",
)


def random_fruit() -> str:
    """Return one of FRUITS at random."""
    return random.choice(FRUITS)


def create_app() -> Flask:
    """Build the random fruit web application."""
    app = Flask(__name__)

    def text_response(body: str):
        return app.response_class(body, mimetype="text/plain")

    @app.get("/")
    def hello():
        return text_response("Hello World Random Fruit!")

    @app.get("/fruit")
    def fruit():
        choice = random_fruit()
        print(f"Random Fruit: {choice}")
        return text_response(choice)

    @app.get("/health")
    def health():
        return text_response("")

    @app.get("/version")
    def version():
        print(f"Version: {VERSION}")
        return text_response(VERSION)

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fruit", description="Random fruit microservice")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    print("Running the service")
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())