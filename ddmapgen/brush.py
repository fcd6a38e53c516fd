"""Boolean stamp textures painted onto tile arrays."""

from __future__ import annotations

from typing import Any

import numpy as np

from ddmapgen.position import Vector2, as_index, vector


class Brush:
    """A boolean texture, optionally with a rescaled copy in use."""

    def __init__(self, texture: np.ndarray | None = None) -> None:
        if texture is None:
            texture = np.ones((1, 1), dtype=bool)
        self.texture = np.array(texture, dtype=bool)
        self.scaled_texture: np.ndarray | None = None

    @classmethod
    def circular(cls, size: int, circularity: float) -> "Brush":
        """A square brush rounded off towards a circle by ``circularity``."""
        if size < 1:
            raise ValueError("brush size must be at least 1")
        circularity = np.float32(min(max(circularity, 0.0), 1.0))
        center = np.float32(size - 1) / np.float32(2.0)
        min_radius = center
        max_radius = np.sqrt(center * center + center * center)
        radius = circularity * min_radius + (np.float32(1.0) - circularity) * max_radius

        coords = np.arange(size, dtype=np.float32) - center
        xs, ys = np.meshgrid(coords, coords, indexing="ij")
        distance = np.sqrt(xs**2 + ys**2)
        return cls(distance <= radius)

    @property
    def active_texture(self) -> np.ndarray:
        """The scaled texture if one is set, otherwise the base texture."""
        return self.texture if self.scaled_texture is None else self.scaled_texture

    def apply_scale(self, factor: float) -> None:
        """Set a nearest-neighbour rescaled copy of the base texture."""
        factor32 = np.float32(factor)
        old_width, old_height = self.texture.shape
        width = max(int(np.float32(old_width) * factor32), 0)
        height = max(int(np.float32(old_height) * factor32), 0)
        inverse = np.float32(1.0) / factor32 if factor32 != 0 else np.float32(0.0)
        rows = (np.arange(width, dtype=np.float32) * inverse).astype(np.int64)
        cols = (np.arange(height, dtype=np.float32) * inverse).astype(np.int64)
        self.scaled_texture = self.texture[np.ix_(rows, cols)]

    def reset_scale(self) -> None:
        self.scaled_texture = None

    def apply(self, tiles: np.ndarray, pos: Vector2, tile: Any) -> None:
        """Stamp ``tile`` onto ``tiles`` centred at ``pos``."""
        texture = self.active_texture
        width, height = texture.shape
        top_left = np.asarray(pos, dtype=np.float64) - vector(int(width / 2), int(height / 2))
        for x, y in np.argwhere(texture):
            tiles[as_index(top_left + vector(x, y))] = tile