import pytest

from ddmapgen.position import Direction, vector
from ddmapgen.walker import NormalWaypoints, Walker, WalkerState


def make_walker():
    return Walker(10.0).set_waypoints([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])


def test_step_without_pending_state_halts():
    walker = make_walker()
    assert walker.step(vector(200.0, 200.0)) == 0
    assert walker.current_step == 0


def test_step_counts_up():
    walker = make_walker()
    walker.set_next_direction(Direction.RIGHT)
    assert walker.step(vector(300.0, 300.0)) == 1
    walker.set_next_direction(Direction.RIGHT)
    assert walker.step(vector(300.0, 300.0)) == 2
    assert walker.current_state().direction is Direction.RIGHT


def test_reaching_waypoint_advances_preference():
    walker = make_walker()
    walker.set_next_waypoint(0)
    walker.step(vector(200.0, 200.0))
    assert walker.preferred_state().waypoint == 1


def test_preferred_direction_points_to_waypoint():
    walker = make_walker()
    walker.set_next_waypoint(0)
    walker.step(vector(200.0, 210.0))
    assert walker.preferred_state().direction is Direction.UP
    assert walker.preferred_state().waypoint == 0


def test_last_waypoint_halts_but_records_state():
    walker = make_walker()
    walker.set_next_waypoint(2).set_next_direction(Direction.LEFT)
    assert walker.step(vector(0.0, 0.0)) == 0
    assert walker.current_state() == WalkerState(Direction.LEFT, 2)


def test_pending_state_is_consumed():
    walker = make_walker()
    walker.set_next_direction(Direction.DOWN)
    walker.step(vector(300.0, 300.0))
    assert walker.step(vector(300.0, 300.0)) == 0


def test_reset_clears_states():
    walker = make_walker()
    walker.set_next_direction(Direction.DOWN)
    walker.step(vector(300.0, 300.0))
    walker.reset()
    assert walker.preferred_state() == WalkerState()
    with pytest.raises(IndexError):
        walker.current_state()


def test_setters_chain():
    walker = Walker(1.0).set_scale_factor(5.0).set_waypoints([(0.5, 0.5)])
    assert walker.scale_factor == 5.0
    assert walker.waypoints == [(0.5, 0.5)]


def test_normal_waypoints_default_empty():
    assert NormalWaypoints().waypoints == []
    assert NormalWaypoints([(0.0, 1.0)]).waypoints == [(0.0, 1.0)]