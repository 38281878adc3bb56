"""Parameter store holding the live render parameters and notifying the renderer binding."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Protocol

from xmastree_renderer.models import Color, RenderParameters
from xmastree_renderer.palette import DEFAULT_PARAMETERS

RenderCallback = Callable[[RenderParameters], None]

logger = logging.getLogger("xmastree.store")


class RandomSource(Protocol):
    def random(self) -> float: ...


def random_color(rng: RandomSource) -> Color:
    red = rng.random()
    green = rng.random()
    blue = rng.random()
    return Color(red, green, blue, 1.0)


class ParameterStore:
    """Holds the current :class:`RenderParameters` snapshot.

    Every mutation replaces exactly one field and then calls the bound render
    callback with the new snapshot. Values are stored as given; range limits
    belong to the sliders that feed the store.
    """

    def __init__(
        self,
        initial: RenderParameters | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._params = initial or DEFAULT_PARAMETERS
        self._rng = rng or random.Random()
        self._callback: RenderCallback | None = None

    @property
    def snapshot(self) -> RenderParameters:
        return self._params

    def bind(self, callback: RenderCallback) -> None:
        self._callback = callback

    def unbind(self) -> None:
        self._callback = None

    def set_tree_scale(self, value: float) -> None:
        self._commit("tree_scale", float(value))

    def set_ornament_size(self, value: float) -> None:
        self._commit("ornament_size", float(value))

    def randomize_ornament_color(self) -> None:
        self._commit("ornament_color", random_color(self._rng))

    def randomize_light_color(self) -> None:
        self._commit("light_color", random_color(self._rng))

    def _commit(self, field: str, value: object) -> None:
        self._params = replace(self._params, **{field: value})
        logger.debug("parameter %s=%r", field, value, extra={"event": "parameter_changed"})
        if self._callback is not None:
            self._callback(self._params)
