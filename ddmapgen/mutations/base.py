"""The interface shared by all mutations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class MutationState(Enum):
    """Whether a mutation still has work to do."""

    PROCESSING = "processing"
    FINISHED = "finished"


class Mutator(ABC, Generic[T]):
    """Something that changes a walker, brush or map step by step."""

    @abstractmethod
    def mutate(self, mutant: T) -> MutationState:
        """Apply one step to ``mutant`` and report the resulting state."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial state so the mutation can run again."""