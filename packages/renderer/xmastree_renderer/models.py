"""Typed renderer models: colors, parameters, geometry, and draw commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


def _channel8(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_argb(cls, value: int) -> Color:
        return cls(
            red=((value >> 16) & 0xFF) / 255.0,
            green=((value >> 8) & 0xFF) / 255.0,
            blue=(value & 0xFF) / 255.0,
            alpha=((value >> 24) & 0xFF) / 255.0,
        )

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return (_channel8(self.red), _channel8(self.green), _channel8(self.blue), _channel8(self.alpha))

    @property
    def hex(self) -> str:
        r, g, b, a = self.to_rgba8()
        return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class CanvasSize:
    width: float
    height: float


@dataclass(frozen=True)
class RenderParameters:
    tree_scale: float
    tree_color: Color
    ornament_size: float
    ornament_color: Color
    light_color: Color


@dataclass(frozen=True)
class TreeLayer:
    apex: Point
    left: Point
    right: Point

    def corners(self) -> tuple[Point, Point, Point]:
        return (self.apex, self.left, self.right)


def _point_dict(p: Point) -> dict[str, float]:
    return {"x": p.x, "y": p.y}


@dataclass(frozen=True)
class FillRect:
    top_left: Point
    width: float
    height: float
    color: Color

    kind = "rect"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "top_left": _point_dict(self.top_left),
            "width": self.width,
            "height": self.height,
            "color": self.color.hex,
        }


@dataclass(frozen=True)
class FillPath:
    contours: tuple[tuple[Point, ...], ...]
    color: Color

    kind = "path"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "contours": [[_point_dict(p) for p in contour] for contour in self.contours],
            "color": self.color.hex,
        }


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    color: Color

    kind = "circle"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "center": _point_dict(self.center),
            "radius": self.radius,
            "color": self.color.hex,
        }


DrawCommand = Union[FillRect, FillPath, FillCircle]
