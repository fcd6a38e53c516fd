"""Mutations that choose the walker's next move."""

from __future__ import annotations

from dataclasses import dataclass, field

from ddmapgen.mutations.base import MutationState, Mutator
from ddmapgen.position import Direction
from ddmapgen.random import Random, Seed
from ddmapgen.walker import Walker


@dataclass
class StraightWalkerMutation(Mutator[Walker]):
    """Follow the walker's preferred direction."""

    overall_steps: int = 0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Walker) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED
        preferred = mutant.preferred_state()
        mutant.set_next_direction(preferred.direction)
        mutant.set_next_waypoint(preferred.waypoint)
        self._steps -= 1
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps


@dataclass
class BackwardsWalkerMutation(Mutator[Walker]):
    """Turn against the preferred direction; reports finished after each move."""

    overall_steps: int = 0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Walker) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED
        preferred = mutant.preferred_state()
        mutant.set_next_direction(preferred.direction.backwards())
        mutant.set_next_waypoint(preferred.waypoint)
        self._steps -= 1
        return MutationState.FINISHED

    def reset(self) -> None:
        self._steps = self.overall_steps


@dataclass
class LeftWalkerMutation(Mutator[Walker]):
    """Turn a quarter counter-clockwise from the preferred direction, without end."""

    overall_steps: int = 0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Walker) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED
        preferred = mutant.preferred_state()
        mutant.set_next_direction(preferred.direction.prev())
        mutant.set_next_waypoint(preferred.waypoint)
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps


@dataclass
class RightWalkerMutation(Mutator[Walker]):
    """Turn a quarter clockwise from the preferred direction."""

    overall_steps: int = 0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Walker) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED
        preferred = mutant.preferred_state()
        mutant.set_next_direction(preferred.direction.next())
        mutant.set_next_waypoint(preferred.waypoint)
        self._steps -= 1
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps


@dataclass
class RandomWalkerMutation(Mutator[Walker]):
    """Pick a seeded random direction and waypoint."""

    overall_steps: int = 0
    seed: Seed = 0
    _steps: int = field(init=False, repr=False)
    _prng: Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps
        self._prng = Random(self.seed)

    def mutate(self, mutant: Walker) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED
        if not mutant.waypoints:
            raise ValueError("walker has no waypoints to choose from")

        random_direction = Direction.from_index(self._prng.gen_u64() % 4)
        random_waypoint = self._prng.gen_u64() % len(mutant.waypoints)

        mutant.set_next_direction(random_direction)
        mutant.set_next_waypoint(random_waypoint)
        self._steps -= 1
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps
        self._prng = Random(self.seed)