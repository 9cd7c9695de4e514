"""Loggers, including one that filters messages by verbosity."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Protocol


class Logger(Protocol):
    def log(self, verbosity: int, message: Any) -> None:
        """Log a message at the given verbosity level."""


class StderrLogger:
    """Writes every message to standard error."""

    def log(self, verbosity: int, message: Any) -> None:
        print(f"verbosity={verbosity}: {message}", file=sys.stderr)


@dataclass
class VerbosityFilter:
    """Pass on only messages up to the given verbosity level."""

    max_verbosity: int
    inner: Logger

    def log(self, verbosity: int, message: Any) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


def do_things(logger: Logger) -> None:
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")


def main(argv=None) -> None:
    do_things(VerbosityFilter(max_verbosity=3, inner=StderrLogger()))


if __name__ == "__main__":
    main()