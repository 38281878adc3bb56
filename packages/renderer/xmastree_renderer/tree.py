"""Procedural Christmas tree: trunk, four foliage layers, ornaments, and lights."""

from __future__ import annotations

from dataclasses import dataclass

from .models import CanvasSize, DrawCommand, FillCircle, FillPath, FillRect, Point, RenderParameters, TreeLayer
from .palette import TRUNK_BROWN
from .surface import DrawSurface, replay

TRUNK_HEIGHT_RATIO = 0.15
TRUNK_WIDTH_RATIO = 0.15
TREE_BASE_RATIO = 0.85


@dataclass(frozen=True)
class LayerShape:
    apex_rise: float
    corner_rise: float
    left_x: float
    right_x: float


# Hand-tuned, bottom to top. Rises are measured upwards from the tree base and
# multiplied by the tree scale; a negative rise puts the corners below the base.
LAYER_SHAPES: tuple[LayerShape, ...] = (
    LayerShape(apex_rise=40, corner_rise=-10, left_x=0.25, right_x=0.75),
    LayerShape(apex_rise=80, corner_rise=30, left_x=0.28, right_x=0.72),
    LayerShape(apex_rise=120, corner_rise=70, left_x=0.31, right_x=0.69),
    LayerShape(apex_rise=160, corner_rise=110, left_x=0.34, right_x=0.66),
)

LIGHT_APEX_DROP = 15
LIGHT_CORNER_INSET = 10


def tree_base_y(canvas: CanvasSize) -> float:
    return canvas.height * TREE_BASE_RATIO


def trunk(canvas: CanvasSize) -> FillRect:
    trunk_height = canvas.height * TRUNK_HEIGHT_RATIO
    trunk_width = canvas.width * TRUNK_WIDTH_RATIO
    return FillRect(
        top_left=Point((canvas.width - trunk_width) / 2, tree_base_y(canvas)),
        width=trunk_width,
        height=trunk_height,
        color=TRUNK_BROWN,
    )


def tree_layers(tree_scale: float, canvas: CanvasSize) -> list[TreeLayer]:
    base_y = tree_base_y(canvas)
    layers = []
    for shape in LAYER_SHAPES:
        corner_y = base_y - shape.corner_rise * tree_scale
        layers.append(
            TreeLayer(
                apex=Point(canvas.width * 0.5, base_y - shape.apex_rise * tree_scale),
                left=Point(canvas.width * shape.left_x, corner_y),
                right=Point(canvas.width * shape.right_x, corner_y),
            )
        )
    return layers


def ornament_points(layers: list[TreeLayer]) -> list[Point]:
    return [point for layer in layers for point in layer.corners()]


def light_points(layers: list[TreeLayer], tree_scale: float) -> list[Point]:
    drop = LIGHT_APEX_DROP * tree_scale
    inset = LIGHT_CORNER_INSET * tree_scale
    points = []
    for layer in layers:
        points.append(layer.apex.offset(0, drop))
        points.append(layer.left.offset(inset, -inset))
        points.append(layer.right.offset(-inset, -inset))
    return points


def render(params: RenderParameters, canvas: CanvasSize) -> list[DrawCommand]:
    """Map parameters and a measured canvas to the ordered draw commands.

    The order is fixed: trunk rectangle, one compound foliage path, twelve
    ornament circles, then twelve light circles. Any canvas is accepted; zero
    or negative sizes just give degenerate geometry.
    """
    layers = tree_layers(params.tree_scale, canvas)

    commands: list[DrawCommand] = [trunk(canvas)]
    commands.append(FillPath(contours=tuple(layer.corners() for layer in layers), color=params.tree_color))
    commands.extend(
        FillCircle(center=p, radius=params.ornament_size, color=params.ornament_color)
        for p in ornament_points(layers)
    )
    commands.extend(
        FillCircle(center=p, radius=params.ornament_size / 2, color=params.light_color)
        for p in light_points(layers, params.tree_scale)
    )
    return commands


def draw(params: RenderParameters, canvas: CanvasSize, surface: DrawSurface) -> int:
    return replay(render(params, canvas), surface)
