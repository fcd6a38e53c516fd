"""Carve a map by walking a brush along waypoints."""

from __future__ import annotations

from typing import Callable, Optional

from ddmapgen.brush import Brush
from ddmapgen.map import Map
from ddmapgen.position import from_raw, shift_by_direction, vector
from ddmapgen.walker import Walker

StepHook = Callable[[Walker, Map, Brush], object]

_MARGIN = 200
_SOLID_TILE = 1
_EMPTY_TILE = 0


class Generator:
    """Drives a walker and a brush over a solid map."""

    def __init__(self) -> None:
        self.walker = Walker(1.0)
        self.brush = Brush()
        self._before_step: Optional[StepHook] = None

    @property
    def scale_factor(self) -> float:
        return self.walker.scale_factor

    @scale_factor.setter
    def scale_factor(self, value: float) -> None:
        self.walker.set_scale_factor(value)

    def on_step(self, func: StepHook) -> None:
        """Call ``func(walker, map, brush)`` before each step."""
        self._before_step = func

    def _run_hook(self, game_map: Map) -> None:
        if self._before_step is not None:
            self._before_step(self.walker, game_map, self.brush)

    def generate(self, waypoints: list[tuple[float, float]]) -> Map:
        """Generate a map along the normalised waypoints."""
        if not waypoints:
            raise ValueError("at least one waypoint is required")

        game_map = Map()
        scale = self.walker.scale_factor

        xs = [x for x, _ in waypoints]
        ys = [y for _, y in waypoints]
        approx_width = (max(xs) - min(xs)) * scale
        approx_height = (max(ys) - min(ys)) * scale

        game_map.reshape(int(approx_width) + 2 * _MARGIN, int(approx_height) + 2 * _MARGIN)
        game_map.fill_game(_SOLID_TILE)

        current_pos = from_raw(waypoints[0], scale) + vector(_MARGIN, _MARGIN)

        self.walker.set_waypoints(waypoints)
        self._run_hook(game_map)

        while self.walker.step(current_pos) != 0:
            self._run_hook(game_map)
            shift_by_direction(current_pos, 1.0, self.walker.current_state().direction)
            self.brush.apply(game_map.game_layer(), current_pos, _EMPTY_TILE)

        self.walker.reset()
        self.brush = Brush()

        return game_map.finalize()