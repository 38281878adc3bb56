"""Drawing surface interface, command replay, and a recording surface."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .models import Color, DrawCommand, FillCircle, FillPath, FillRect, Point


class DrawSurface(Protocol):
    def fill_rect(self, top_left: Point, width: float, height: float, color: Color) -> None: ...

    def fill_path(self, contours: Sequence[Sequence[Point]], color: Color) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None: ...


def replay(commands: Iterable[DrawCommand], surface: DrawSurface) -> int:
    """Issue commands to ``surface`` in order and return how many were drawn."""
    count = 0
    for command in commands:
        if isinstance(command, FillRect):
            surface.fill_rect(command.top_left, command.width, command.height, command.color)
        elif isinstance(command, FillPath):
            surface.fill_path(command.contours, command.color)
        elif isinstance(command, FillCircle):
            surface.fill_circle(command.center, command.radius, command.color)
        else:
            raise TypeError(f"Unsupported draw command: {command!r}")
        count += 1
    return count


class RecordingSurface:
    """Collects every primitive it receives instead of rasterizing it."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def fill_rect(self, top_left: Point, width: float, height: float, color: Color) -> None:
        self.commands.append(FillRect(top_left=top_left, width=width, height=height, color=color))

    def fill_path(self, contours: Sequence[Sequence[Point]], color: Color) -> None:
        self.commands.append(FillPath(contours=tuple(tuple(c) for c in contours), color=color))

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self.commands.append(FillCircle(center=center, radius=radius, color=color))

    def clear(self) -> None:
        self.commands.clear()
