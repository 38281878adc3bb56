"""Renderer package for the procedural Christmas tree."""

from .models import CanvasSize, Color, DrawCommand, FillCircle, FillPath, FillRect, Point, RenderParameters, TreeLayer
from .palette import DEFAULT_PARAMETERS, get_color, list_colors
from .surface import DrawSurface, RecordingSurface, replay
from .tree import draw, light_points, ornament_points, render, tree_layers

try:  # pragma: no cover - optional at import time for test environments
    from .raster import PillowSurface, render_image
except Exception:  # pragma: no cover
    PillowSurface = None  # type: ignore[assignment]
    render_image = None  # type: ignore[assignment]

__all__ = [
    "CanvasSize",
    "Color",
    "DEFAULT_PARAMETERS",
    "DrawCommand",
    "DrawSurface",
    "FillCircle",
    "FillPath",
    "FillRect",
    "Point",
    "RecordingSurface",
    "RenderParameters",
    "TreeLayer",
    "draw",
    "get_color",
    "light_points",
    "list_colors",
    "ornament_points",
    "render",
    "replay",
    "tree_layers",
]

if PillowSurface is not None:
    __all__.extend(["PillowSurface", "render_image"])
