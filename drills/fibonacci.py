"""Fibonacci numbers."""

from __future__ import annotations

import argparse


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, where fib(n) is 1 for n <= 2."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def main(argv=None) -> None:
    """Print fib(n); n defaults to 20."""
    parser = argparse.ArgumentParser(description="Print a Fibonacci number.")
    parser.add_argument("n", type=int, nargs="?", default=20)
    args = parser.parse_args(argv)
    print(f"fib(n) = {fib(args.n)}")


if __name__ == "__main__":
    main()