"""Run chains of mutations in counted or endless loops."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, TypeVar

from ddmapgen.mutations.base import MutationState, Mutator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class MutationLoop(Generic[T]):
    """A chain of mutations run ``count`` times, or endlessly when ``count`` is None."""

    count: Optional[int] = None
    mutations: list[Mutator[T]] = field(default_factory=list)

    def reset(self) -> None:
        """Reset every mutation in the chain."""
        for mutation in self.mutations:
            mutation.reset()


def reset_all(loops: Iterable[MutationLoop[T]]) -> None:
    """Reset the mutations of every loop."""
    for loop in loops:
        loop.reset()


def _run_counted(mutant: T, loop: MutationLoop[T]) -> None:
    if loop.count == 0:
        return
    loop.count -= 1
    for mutation in loop.mutations:
        state = mutation.mutate(mutant)
        logger.debug("[state]\t%s", state)
        if state is MutationState.PROCESSING:
            break


def _run_endless(mutant: T, loop: MutationLoop[T]) -> None:
    if not loop.mutations:
        return
    last = len(loop.mutations) - 1
    last_finished = False
    for index, mutation in enumerate(loop.mutations):
        state = mutation.mutate(mutant)
        processed = state is MutationState.PROCESSING
        if index == last:
            last_finished = not processed
        logger.debug("[state]\t%s", state)
        if processed:
            break

    if last_finished:
        loop.reset()
        loop.mutations[0].mutate(mutant)


def mutate_all(mutant: T, loops: Iterable[MutationLoop[T]]) -> None:
    """Advance every loop by one step against ``mutant``.

    Within a loop, mutations run in order until one is still processing.
    A counted loop spends one unit of its count per call and stops at zero.
    An endless loop whose last mutation has finished is reset and restarted.
    """
    for loop in loops:
        if loop.count is not None:
            _run_counted(mutant, loop)
        else:
            _run_endless(mutant, loop)