"""String processing functions and a web service exposing them."""

from __future__ import annotations

import argparse

from flask import Flask

WELCOME = (
    "Hello World! This is a Microservice for processing strings. "
    "You can use the following routes to process strings: /reverse, /piglatin, /binary"
)


def reverse(text: str) -> str:
    """Reverse the characters of a string."""
    return text[::-1]


def pig_latin(text: str) -> str:
    """Insert "ay" after the first character."""
    if not text:
        return ""
    return f"{text[0]}ay{text[1:]}"


def binary(text: str) -> str:
    """Write each character's low byte as eight binary digits."""
    return "".join(format(ord(char) & 0xFF, "08b") for char in text)


def create_app() -> Flask:
    """Build the string processing web application."""
    app = Flask(__name__)

    def text_response(body: str):
        return app.response_class(body, mimetype="text/plain")

    @app.get("/")
    def hello():
        return text_response(WELCOME)

    @app.get("/reverse/<text>")
    def reverse_it(text: str):
        result = reverse(text)
        print(f"Reverse: {result}")
        return text_response(result)

    @app.get("/piglatin/<text>")
    def piglatin_it(text: str):
        result = pig_latin(text)
        print(f"Pig Latin: {result}")
        return text_response(result)

    @app.get("/binary/<text>")
    def binary_it(text: str):
        result = binary(text)
        print(f"Binary: {result}")
        return text_response(result)

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="textops", description="String processing microservice")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    print("Running the service")
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())