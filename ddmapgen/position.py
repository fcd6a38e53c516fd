"""Grid directions and small 2D vector helpers."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

Vector2 = np.ndarray


class Direction(IntEnum):
    """One of the four straight directions on the tile grid."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def prev(self) -> "Direction":
        """The direction a quarter turn counter-clockwise."""
        return Direction((self.value - 1) % 4)

    def next(self) -> "Direction":
        """The direction a quarter turn clockwise."""
        return Direction((self.value + 1) % 4)

    def backwards(self) -> "Direction":
        """The opposite direction."""
        return self.next().next()

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        """Map 0..3 to a direction; any other index gives UP."""
        try:
            return cls(index)
        except ValueError:
            return cls.UP


def vector(x: float, y: float) -> Vector2:
    """Build a two-component float vector."""
    return np.array([x, y], dtype=np.float64)


def get_x(value: Vector2) -> float:
    return float(value[0])


def get_y(value: Vector2) -> float:
    return float(value[1])


def _to_unsigned(component: float) -> int:
    # Saturating truncation: negatives and NaN become 0.
    if math.isnan(component) or component <= 0:
        return 0
    return int(component)


def as_index(value: Vector2) -> tuple[int, int]:
    """Truncate a position into a (row, column) array index."""
    return _to_unsigned(float(value[0])), _to_unsigned(float(value[1]))


def from_raw(value: tuple[float, float], scale_factor: float) -> Vector2:
    """Scale a normalised waypoint into map space."""
    return vector(value[0] * scale_factor, value[1] * scale_factor)


def euclidian(lhs: Vector2, rhs: Vector2) -> float:
    """Euclidean distance between two points."""
    return length(vector(lhs[0] - rhs[0], lhs[1] - rhs[1]))


def manhattan(value: Vector2) -> float:
    """Sum of the vector's components."""
    return float(sum(float(component) for component in value))


def length(value: Vector2) -> float:
    return math.sqrt(float(value[0]) ** 2 + float(value[1]) ** 2)


def normalize(value: Vector2) -> Vector2:
    """Return the vector scaled to unit length."""
    return np.asarray(value, dtype=np.float64) / length(value)


def angle(value: Vector2) -> float:
    """atan2 of the vector, taking x first and y second."""
    return math.atan2(float(value[0]), float(value[1]))


def angle_direction(angle: float) -> Direction:
    """Quantise an angle into one of the four directions."""
    turned = (angle + 2.0 * math.pi + math.pi / 2.0) % (math.pi * 2.0)

    if 0.0 <= turned <= math.pi / 2.0:
        return Direction.RIGHT
    if math.pi / 2.0 <= turned <= math.pi:
        return Direction.UP
    if math.pi <= turned <= 3.0 * math.pi / 2.0:
        return Direction.LEFT
    if 3.0 * math.pi / 2.0 <= turned <= 2.0 * math.pi:
        return Direction.DOWN
    raise ValueError(f"angle {angle!r} has no direction")


def direction(value: Vector2) -> Direction:
    return angle_direction(angle(value))


def shift_by_direction(value: Vector2, shift: float, direction: Direction) -> None:
    """Move the vector in place by ``shift`` towards ``direction``."""
    if direction is Direction.UP:
        value[1] -= shift
    elif direction is Direction.RIGHT:
        value[0] += shift
    elif direction is Direction.DOWN:
        value[1] += shift
    else:
        value[0] -= shift


def straight_neighbors(pos: Vector2) -> list[Vector2]:
    """The four neighbours in Up, Right, Down, Left order."""
    neighbors = []
    for step in Direction:
        neighbor = np.array(pos, dtype=np.float64)
        shift_by_direction(neighbor, 1.0, step)
        neighbors.append(neighbor)
    return neighbors


def all_neighbors(pos: Vector2) -> list[Vector2]:
    """The four straight neighbours followed by the four diagonal ones."""
    straight = straight_neighbors(pos)
    diagonal = straight_neighbors(pos)
    for neighbor, step in zip(diagonal, Direction):
        shift_by_direction(neighbor, 1.0, step.next())
    return straight + diagonal