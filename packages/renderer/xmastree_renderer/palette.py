"""Built-in colors and default render parameters."""

from __future__ import annotations

from .models import Color, RenderParameters

TRUNK_BROWN = Color.from_argb(0xFF8B4513)
SEA_GREEN = Color.from_argb(0xFF2E8B57)
RED = Color(1.0, 0.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0, 1.0)

NAMED_COLORS: dict[str, Color] = {
    "brown": TRUNK_BROWN,
    "sea-green": SEA_GREEN,
    "red": RED,
    "yellow": YELLOW,
}

DEFAULT_PARAMETERS = RenderParameters(
    tree_scale=1.0,
    tree_color=SEA_GREEN,
    ornament_size=10.0,
    ornament_color=RED,
    light_color=YELLOW,
)


def list_colors() -> list[str]:
    return sorted(NAMED_COLORS.keys())


def get_color(name: str) -> Color:
    try:
        return NAMED_COLORS[name]
    except KeyError:
        raise ValueError(f"Unknown color: {name}") from None
