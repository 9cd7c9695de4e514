"""Dining philosophers with threads, avoiding deadlock by ordering forks."""

from __future__ import annotations

import queue
import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterable

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")


@dataclass
class Philosopher:
    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: queue.Queue
    eat_time: float = 0.01

    def think(self) -> None:
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(self.eat_time)


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> list[str]:
    """Let the philosophers eat and think ``rounds`` times; return all thoughts."""
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]
    finished = object()

    def run(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                philosopher.eat()
                philosopher.think()
        finally:
            thoughts.put(finished)

    threads = []
    for index, name in enumerate(names):
        left = forks[index]
        right = forks[(index + 1) % len(forks)]
        # Break the symmetry so that the philosophers cannot deadlock.
        if index == len(forks) - 1:
            left, right = right, left
        philosopher = Philosopher(name, left, right, thoughts)
        thread = threading.Thread(target=run, args=(philosopher,), daemon=True)
        thread.start()
        threads.append(thread)

    collected: list[str] = []
    remaining = len(threads)
    while remaining:
        item = thoughts.get()
        if item is finished:
            remaining -= 1
        else:
            collected.append(item)
    for thread in threads:
        thread.join()
    return collected


def main(argv=None) -> None:
    for thought in dine():
        print(thought)


if __name__ == "__main__":
    main(sys.argv[1:])