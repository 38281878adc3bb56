"""Pillow rasterization of draw commands for icons and headless checks."""

from __future__ import annotations

from typing import Sequence

from PIL import Image, ImageDraw

from .models import CanvasSize, Color, Point, RenderParameters
from .tree import draw


def _box(x0: float, y0: float, x1: float, y1: float) -> tuple[float, float, float, float]:
    # Pillow rejects boxes whose second corner precedes the first.
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


class PillowSurface:
    def __init__(self, image: Image.Image) -> None:
        self.image = image
        self._draw = ImageDraw.Draw(image, "RGBA")

    def fill_rect(self, top_left: Point, width: float, height: float, color: Color) -> None:
        box = _box(top_left.x, top_left.y, top_left.x + width, top_left.y + height)
        self._draw.rectangle(box, fill=color.to_rgba8())

    def fill_path(self, contours: Sequence[Sequence[Point]], color: Color) -> None:
        fill = color.to_rgba8()
        for contour in contours:
            if len(contour) < 3:
                continue
            self._draw.polygon([(p.x, p.y) for p in contour], fill=fill)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        box = _box(center.x - radius, center.y - radius, center.x + radius, center.y + radius)
        self._draw.ellipse(box, fill=color.to_rgba8())


def render_image(
    params: RenderParameters,
    width: int,
    height: int,
    background: tuple[int, int, int, int] = (255, 255, 255, 0),
) -> Image.Image:
    image = Image.new("RGBA", (max(0, width), max(0, height)), background)
    draw(params, CanvasSize(float(width), float(height)), PillowSurface(image))
    return image
