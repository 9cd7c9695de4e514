"""A websocket chat client that sends lines and prints what the server says."""

from __future__ import annotations

import asyncio
import contextlib
import sys
import threading
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, Iterable, Union

import websockets

DEFAULT_URI = "ws://127.0.0.1:2000"

Lines = Union[Iterable[str], AsyncIterable[str]]


async def _aiter(lines: Lines) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        async for line in lines:  # type: ignore[union-attr]
            yield line
    else:
        for line in lines:  # type: ignore[union-attr]
            yield line


async def _first_completed(*coroutines: Awaitable[Any]) -> None:
    """Run coroutines together until one finishes, then cancel the rest."""
    tasks = [asyncio.ensure_future(coroutine) for coroutine in coroutines]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task
    for task in done:
        task.result()


async def run_client(uri: str, lines: Lines) -> list[str]:
    """Send each line to the server and print incoming text messages.

    Stops when the lines run out or the server closes the connection, and
    returns the text messages received.
    """
    received: list[str] = []
    async with websockets.connect(uri) as websocket:

        async def receive() -> None:
            async for message in websocket:
                if isinstance(message, str):
                    print(f"From server: {message}")
                    received.append(message)

        async def send() -> None:
            async for line in _aiter(lines):
                await websocket.send(line)

        await _first_completed(receive(), send())
    return received


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def read() -> None:
        for line in sys.stdin:
            loop.call_soon_threadsafe(queue.put_nowait, line)
        loop.call_soon_threadsafe(queue.put_nowait, None)

    threading.Thread(target=read, daemon=True).start()
    while True:
        line = await queue.get()
        if line is None:
            return
        yield line.removesuffix("\n").removesuffix("\r")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    uri = args[0] if args else DEFAULT_URI
    try:
        asyncio.run(run_client(uri, _stdin_lines()))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())