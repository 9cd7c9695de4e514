"""A small text GUI made of labels, buttons and windows."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import TextIO


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _center(text: str, width: int) -> str:
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(ABC):
    @abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Draw the widget into a text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        inner = io.StringIO()
        self.label.draw_into(inner)
        border = "+" + "-" * width + "+\n"
        buffer.write(border)
        for line in _lines(inner.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(border)


class Window(Widget):
    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self.widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        # Two characters of border and padding on each side.
        return self._inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)

        width = self._inner_width()
        border = "+-" + "-" * width + "-+\n"
        buffer.write(border)
        buffer.write(f"| {_center(self.title, width)} |\n")
        buffer.write("+=" + "=" * width + "=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(width)} |\n")
        buffer.write(border)


def main(argv=None) -> None:
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()


if __name__ == "__main__":
    main()