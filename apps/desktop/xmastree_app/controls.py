"""Qt-free helpers for the slider controls and their labels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SliderRange:
    """Maps a float range onto the integer positions of a ``QSlider``."""

    minimum: float
    maximum: float
    steps: int = 1000

    def to_position(self, value: float) -> int:
        clamped = max(self.minimum, min(self.maximum, value))
        return int(round((clamped - self.minimum) / (self.maximum - self.minimum) * self.steps))

    def to_value(self, position: int) -> float:
        position = max(0, min(self.steps, position))
        return self.minimum + (self.maximum - self.minimum) * position / self.steps


def scale_label(scale: float) -> str:
    # Truncated to whole percent; 2.3 * 100 is 229.99999999999997 before rounding.
    return f"Tree size: {int(round(scale * 100, 6))} %"


def ornament_label(size: float) -> str:
    return f"Ornament size: {int(size)} cm"
