"""Dining philosophers with asyncio tasks, retrying until both forks are free."""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from typing import Iterable

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_RETRY_DELAY = 0.001


async def _try_lock(lock: asyncio.Lock) -> bool:
    if lock.locked():
        return False
    await lock.acquire()
    return True


@dataclass
class Philosopher:
    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: asyncio.Queue
    eat_time: float = 0.005

    async def think(self) -> None:
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        # Keep trying until both forks are held.
        while True:
            left = await _try_lock(self.left_fork)
            right = await _try_lock(self.right_fork)
            if left and right:
                break
            if left:
                self.left_fork.release()
            if right:
                self.right_fork.release()
            await asyncio.sleep(_RETRY_DELAY)
        try:
            print(f"{self.name} is eating...")
            await asyncio.sleep(self.eat_time)
        finally:
            self.left_fork.release()
            self.right_fork.release()


async def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> list[str]:
    """Let the philosophers think and eat ``rounds`` times; return all thoughts."""
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    forks = [asyncio.Lock() for _ in names]
    finished = object()

    async def run(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                await philosopher.think()
                await philosopher.eat()
        finally:
            await thoughts.put(finished)

    tasks = [
        asyncio.create_task(
            run(
                Philosopher(
                    name, forks[index], forks[(index + 1) % len(forks)], thoughts
                )
            )
        )
        for index, name in enumerate(names)
    ]

    collected: list[str] = []
    remaining = len(tasks)
    while remaining:
        item = await thoughts.get()
        if item is finished:
            remaining -= 1
        else:
            collected.append(item)
    await asyncio.gather(*tasks)
    return collected


def main(argv=None) -> None:
    for thought in asyncio.run(dine()):
        print(f"Here is a thought: {thought}")


if __name__ == "__main__":
    main(sys.argv[1:])