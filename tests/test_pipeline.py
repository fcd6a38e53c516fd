from dataclasses import dataclass, field

from ddmapgen.mutations.base import MutationState, Mutator
from ddmapgen.mutations.walker import StraightWalkerMutation
from ddmapgen.pipeline import MutationLoop, mutate_all, reset_all
from ddmapgen.position import Direction
from ddmapgen.walker import Walker


@dataclass
class Recorder(Mutator[list]):
    """Appends its name to the mutant for a fixed number of steps."""

    name: str
    steps: int
    left: int = field(init=False)
    resets: int = field(default=0, init=False)

    def __post_init__(self):
        self.left = self.steps

    def mutate(self, mutant):
        if self.left == 0:
            return MutationState.FINISHED
        self.left -= 1
        mutant.append(self.name)
        return MutationState.PROCESSING

    def reset(self):
        self.left = self.steps
        self.resets += 1


def test_counted_loop_spends_count_and_stops():
    log = []
    loop = MutationLoop(count=2, mutations=[Recorder("a", 10)])
    for _ in range(5):
        mutate_all(log, [loop])
    assert log == ["a", "a"]
    assert loop.count == 0


def test_counted_loop_moves_on_after_finished_mutation():
    log = []
    loop = MutationLoop(count=3, mutations=[Recorder("a", 1), Recorder("b", 5)])
    for _ in range(3):
        mutate_all(log, [loop])
    assert log == ["a", "b", "b"]


def test_endless_loop_restarts_after_last_finishes():
    log = []
    first = Recorder("a", 1)
    second = Recorder("b", 1)
    loop = MutationLoop(mutations=[first, second])
    mutate_all(log, [loop])
    mutate_all(log, [loop])
    assert log == ["a", "b"]
    mutate_all(log, [loop])
    # both finished: chain is reset and the first mutation runs again
    assert log == ["a", "b", "a"]
    assert first.resets == 1
    assert second.resets == 1


def test_endless_empty_loop_is_skipped():
    log = []
    loop = MutationLoop()
    mutate_all(log, [loop])
    assert log == []
    assert loop.count is None


def test_loops_run_in_order():
    log = []
    loops = [
        MutationLoop(count=1, mutations=[Recorder("x", 3)]),
        MutationLoop(mutations=[Recorder("y", 3)]),
    ]
    mutate_all(log, loops)
    assert log == ["x", "y"]


def test_reset_all_restores_every_mutation():
    log = []
    a = Recorder("a", 1)
    b = Recorder("b", 1)
    loops = [MutationLoop(mutations=[a]), MutationLoop(count=5, mutations=[b])]
    mutate_all(log, loops)
    assert a.left == 0 and b.left == 0
    reset_all(loops)
    assert a.left == 1 and b.left == 1


def test_loop_reset_method():
    r = Recorder("a", 2)
    loop = MutationLoop(mutations=[r])
    mutate_all([], [loop])
    loop.reset()
    assert r.left == 2


def test_straight_mutation_sets_walker_next_state():
    walker = Walker(1.0)
    walker.set_waypoints([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
    loop = MutationLoop(mutations=[StraightWalkerMutation(1)])
    mutate_all(walker, [loop])
    walker.step([200.0, 200.0])
    assert walker.current_state().direction == Direction.UP
    assert walker.current_state().waypoint == 0