"""A client and an echo server, the groundwork for a multiplayer roulette game."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import uuid

HOST = "127.0.0.1"
PORT = 8080
BUFFER_SIZE = 1024


def get_id() -> str:
    """Return a fresh random identifier for a client."""
    return str(uuid.uuid4())


async def _close(writer: asyncio.StreamWriter) -> None:
    writer.close()
    with contextlib.suppress(ConnectionError):
        await writer.wait_closed()


async def serve(host: str = HOST, port: int = PORT) -> None:
    """Echo every message back with the server address appended, until cancelled."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        try:
            while True:
                data = await reader.read(BUFFER_SIZE)
                if not data:
                    return
                message = data.decode("utf-8", errors="replace")
                print(f"Server received: {message}")
                writer.write(f"{message}:{host}:{port}".encode())
                await writer.drain()
        except ConnectionError:
            return
        finally:
            await _close(writer)

    server = await asyncio.start_server(handle, host, port)
    async with server:
        await server.serve_forever()


async def send_message(message: str, host: str = HOST, port: int = PORT) -> str:
    """Send a message tagged with a fresh client id and return the server's reply."""
    reader, writer = await asyncio.open_connection(host, port)
    try:
        writer.write(f"{get_id()}:{message}".encode())
        await writer.drain()
        data = await reader.read(BUFFER_SIZE)
    finally:
        await _close(writer)
    response = data.decode("utf-8", errors="replace")
    print(f"Client received: {response}")
    return response


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rrgame", description="Client Server Roulette Game")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0")
    commands = parser.add_subparsers(dest="command")
    client = commands.add_parser("client", help="send a message to the server")
    client.add_argument("-m", "--message", default="Hello World")
    server = commands.add_parser("server", help="run the server")
    for command in (client, server):
        command.add_argument("--host", default=HOST)
        command.add_argument("--port", type=int, default=PORT)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "client":
        print("Client connecting to server")
        asyncio.run(send_message(args.message, args.host, args.port))
    elif args.command == "server":
        print("Server listening")
        asyncio.run(serve(args.host, args.port))
    else:
        print("Please specify a subcommand")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())