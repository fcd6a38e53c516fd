"""The walker that steers generation towards a list of waypoints."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from ddmapgen.position import Direction, Vector2, euclidian, from_raw, straight_neighbors, vector

logger = logging.getLogger(__name__)

_MARGIN = 200.0
_REACH_DISTANCE = 2.0
_HISTORY = 3


@dataclass
class NormalWaypoints:
    """Waypoints in normalised coordinates."""

    waypoints: list[tuple[float, float]] = field(default_factory=list)


@dataclass(order=True)
class WalkerState:
    """Direction of movement and the index of the targeted waypoint."""

    direction: Direction = Direction.UP
    waypoint: int = 0


class Walker:
    """Tracks the walker's recent states and its preferred next move."""

    def __init__(self, scale_factor: float) -> None:
        self.scale_factor = scale_factor
        self.waypoints: list[tuple[float, float]] = []
        self._states: deque[WalkerState] = deque(maxlen=_HISTORY)
        self._preferred = WalkerState()
        self._next: WalkerState | None = None
        self._current_step = 0

    @property
    def current_step(self) -> int:
        return self._current_step

    def reset(self) -> None:
        """Forget states and pending moves; the step counter is kept."""
        self._states.clear()
        self._preferred = WalkerState()
        self._next = None

    def set_waypoints(self, raw_waypoints: list[tuple[float, float]]) -> "Walker":
        self.waypoints = list(raw_waypoints)
        return self

    def set_scale_factor(self, scale_factor: float) -> "Walker":
        self.scale_factor = scale_factor
        return self

    def set_next_direction(self, direction: Direction) -> "Walker":
        if self._next is None:
            self._next = WalkerState(direction=direction)
        else:
            self._next.direction = direction
        return self

    def set_next_waypoint(self, waypoint: int) -> "Walker":
        if self._next is None:
            self._next = WalkerState(waypoint=waypoint)
        else:
            self._next.waypoint = waypoint
        return self

    def current_state(self) -> WalkerState:
        if not self._states:
            raise IndexError("walker has no state yet")
        return self._states[-1]

    def preferred_state(self) -> WalkerState:
        return self._preferred

    def step(self, current_pos: Vector2) -> int:
        """Commit the pending state; return the new step count, or 0 to halt."""
        if self._next is None:
            return 0

        state, self._next = self._next, None
        self._states.append(state)

        if len(self.waypoints) == state.waypoint + 1:
            return 0

        waypoint_pos = from_raw(self.waypoints[state.waypoint], self.scale_factor) + vector(
            _MARGIN, _MARGIN
        )
        logger.debug("%s\t->\t%s", current_pos, waypoint_pos)

        if euclidian(waypoint_pos, current_pos) < _REACH_DISTANCE:
            self._preferred.waypoint += 1

        distances = [euclidian(n, waypoint_pos) for n in straight_neighbors(current_pos)]
        nearest = min(range(len(distances)), key=distances.__getitem__)
        self._preferred.direction = Direction(nearest)

        self._current_step += 1
        return self._current_step