"""Small, self-contained programming drills, each usable as a library."""

__version__ = "0.1.0"