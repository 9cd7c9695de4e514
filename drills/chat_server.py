"""A websocket chat server that relays every text message to all clients."""

from __future__ import annotations

import asyncio
import contextlib
import sys
from typing import Any, Awaitable

import websockets

WELCOME = "Welcome to chat! Type a message"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000


class Broadcast:
    """Fans each message out to every subscribed queue.

    A subscriber that falls more than ``capacity`` messages behind loses
    the oldest messages it has not read yet.
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: list[asyncio.Queue] = []

    def subscribe(self) -> asyncio.Queue:
        """Return a new queue that receives every message sent from now on."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.capacity)
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Stop delivering messages to ``queue``."""
        with contextlib.suppress(ValueError):
            self._subscribers.remove(queue)

    def send(self, message: str) -> int:
        """Deliver ``message`` to every subscriber; return how many got it."""
        if not self._subscribers:
            raise RuntimeError("no subscribers to receive the message")
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(message)
        return len(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)


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


async def handle_connection(websocket, broadcast: Broadcast) -> None:
    """Relay a client's text messages to everyone and everyone's to the client."""
    await websocket.send(WELCOME)
    inbox = broadcast.subscribe()
    address = getattr(websocket, "remote_address", None)

    async def receive() -> None:
        async for message in websocket:
            if isinstance(message, str):
                print(f"From client {address!r} {message!r}")
                broadcast.send(message)

    async def forward() -> None:
        while True:
            await websocket.send(await inbox.get())

    try:
        await _first_completed(receive(), forward())
    finally:
        broadcast.unsubscribe(inbox)


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept chat clients on ``host``:``port`` until cancelled."""
    broadcast = Broadcast()

    async def handler(websocket) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        await handle_connection(websocket, broadcast)

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    port = int(args[0]) if args else DEFAULT_PORT
    try:
        asyncio.run(serve(DEFAULT_HOST, port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())