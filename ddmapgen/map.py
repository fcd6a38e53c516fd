"""Physics layers of a generated map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from ddmapgen.position import Vector2, as_index

DEFAULT_TILE = 0


class LayerKind(Enum):
    """The physics layers a map can carry."""

    GAME = "game"
    FRONT = "front"
    TELE = "tele"
    SPEEDUP = "speedup"
    SWITCH = "switch"
    TUNE = "tune"


_ID_LAYERS = {LayerKind.GAME, LayerKind.FRONT}


def _blank(kind: LayerKind, width: int, height: int) -> np.ndarray:
    dtype = np.uint8 if kind in _ID_LAYERS else object
    return np.full((width, height), DEFAULT_TILE, dtype=dtype)


@dataclass
class MapInfo:
    """Descriptive metadata stored with the map."""

    author: str = "mapgen"
    version: str = "1.0beta"
    license: str = "CC0"


@dataclass
class Map:
    """A set of equally sized tile layers, indexed as ``[x, y]``."""

    info: MapInfo = field(default_factory=MapInfo)
    _layers: dict[LayerKind, np.ndarray] = field(
        default_factory=lambda: {LayerKind.GAME: _blank(LayerKind.GAME, 1, 1)},
        repr=False,
    )

    @property
    def width(self) -> int:
        return self.game_layer().shape[0]

    @property
    def height(self) -> int:
        return self.game_layer().shape[1]

    @property
    def kinds(self) -> list[LayerKind]:
        """The kinds of layer present, in the order they were added."""
        return list(self._layers)

    def add_layer(self, kind: LayerKind) -> np.ndarray:
        """Add an empty layer of the map's current size."""
        if kind in self._layers:
            raise ValueError(f"map already has a {kind.value} layer")
        tiles = _blank(kind, self.width, self.height)
        self._layers[kind] = tiles
        return tiles

    def layer(self, kind: LayerKind) -> np.ndarray:
        try:
            return self._layers[kind]
        except KeyError:
            raise KeyError(f"map has no {kind.value} layer") from None

    def game_layer(self) -> np.ndarray:
        return self.layer(LayerKind.GAME)

    def reshape(self, width: int, height: int) -> None:
        """Resize every layer; a real change clears all placed tiles."""
        if (self.width, self.height) == (width, height):
            return
        for kind in self._layers:
            self._layers[kind] = _blank(kind, width, height)

    def clear(self) -> None:
        """Reset every tile of every layer to the empty tile."""
        for tiles in self._layers.values():
            tiles.fill(DEFAULT_TILE)

    def fill(self, kind: LayerKind, tile: Any) -> None:
        """Fill a layer with one tile; does nothing if the layer is absent."""
        tiles = self._layers.get(kind)
        if tiles is not None:
            tiles.fill(tile)

    def fill_game(self, tile: Any) -> None:
        self.fill(LayerKind.GAME, tile)

    def set_tile(self, kind: LayerKind, pos: Vector2, tile: Any) -> None:
        """Place a tile; does nothing if the layer is absent."""
        tiles = self._layers.get(kind)
        if tiles is not None:
            tiles[as_index(pos)] = tile

    def finalize(self) -> "Map":
        """Trim border rows and columns that repeat their neighbour, then return the map."""
        for axis in (0, 1):
            arrays = list(self._layers.values())

            def same(a: int, b: int) -> bool:
                return all(
                    np.array_equal(np.take(arr, a, axis=axis), np.take(arr, b, axis=axis))
                    for arr in arrays
                )

            start, stop = 0, arrays[0].shape[axis]
            while stop - start > 1 and same(start, start + 1):
                start += 1
            while stop - start > 1 and same(stop - 1, stop - 2):
                stop -= 1
            keep = range(start, stop)
            for kind, arr in self._layers.items():
                self._layers[kind] = np.take(arr, keep, axis=axis)
        return self