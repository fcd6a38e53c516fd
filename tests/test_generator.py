import numpy as np
import pytest

from ddmapgen.brush import Brush
from ddmapgen.generator import Generator
from ddmapgen.mutations.walker import StraightWalkerMutation

WAYPOINTS = [(0.0, 0.0), (1.0, 0.0)]


def test_without_hook_map_stays_solid():
    result = Generator().generate(WAYPOINTS)
    tiles = result.game_layer()
    assert tiles.shape == (1, 1)
    assert tiles[0, 0] == 1


def test_empty_waypoints_raise():
    with pytest.raises(ValueError):
        Generator().generate([])


def test_scale_factor_goes_to_walker():
    generator = Generator()
    generator.scale_factor = 200.0
    assert generator.walker.scale_factor == 200.0
    assert generator.scale_factor == 200.0


def test_straight_walk_carves_one_tile():
    generator = Generator()
    generator.scale_factor = 10.0
    mutation = StraightWalkerMutation(1000)
    generator.on_step(lambda walker, game_map, brush: mutation.mutate(walker))
    tiles = generator.generate(WAYPOINTS).game_layer()
    assert tiles.shape == (3, 3)
    assert int((tiles == 0).sum()) == 1
    assert tiles[1, 1] == 0


def test_hook_receives_generator_tools_and_brush_is_reset():
    generator = Generator()
    seen = []

    def hook(walker, game_map, brush):
        seen.append((walker is generator.walker, brush is generator.brush))
        brush.apply_scale(3.0)

    generator.on_step(hook)
    used_brush = generator.brush
    generator.generate(WAYPOINTS)
    assert seen and all(a and b for a, b in seen)
    assert generator.brush is not used_brush
    assert isinstance(generator.brush, Brush) and generator.brush.scaled_texture is None


def test_generation_is_repeatable():
    generator = Generator()
    generator.scale_factor = 10.0
    mutation = StraightWalkerMutation(1000)
    generator.on_step(lambda walker, game_map, brush: mutation.mutate(walker))
    first = generator.generate(WAYPOINTS).game_layer()
    second = generator.generate(WAYPOINTS).game_layer()
    assert np.array_equal(first, second)