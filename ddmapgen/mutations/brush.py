"""Mutations that rescale the brush over time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ddmapgen.brush import Brush
from ddmapgen.mutations.base import MutationState, Mutator

logger = logging.getLogger(__name__)


@dataclass
class PulseBrushMutation(Mutator[Brush]):
    """Grow the brush from a border value to a climax and back down."""

    value_border: int = 0
    value_climax: int = 0
    overall_steps: int = 0
    normal_peak: float = 0.0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Brush) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED

        diff = abs(float(self.value_border) - float(self.value_climax))
        current_step = self.overall_steps - self._steps
        steps_until_peak = int(self.overall_steps * self.normal_peak)

        if current_step < steps_until_peak:
            slope = current_step / steps_until_peak * diff + self.value_border
        elif current_step == steps_until_peak:
            slope = float(self.value_climax)
        else:
            slope = (
                self._steps / (self.overall_steps - steps_until_peak) * diff + self.value_border
            )

        logger.debug("[pulse]\tslope\t%s", slope)
        mutant.apply_scale(slope)
        self._steps -= 1
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps


@dataclass
class TransitionBrushMutation(Mutator[Brush]):
    """Scale the brush linearly from one value towards another."""

    value_from: int = 0
    value_to: int = 0
    overall_steps: int = 0
    _steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._steps = self.overall_steps

    def mutate(self, mutant: Brush) -> MutationState:
        if self._steps == 0:
            return MutationState.FINISHED

        diff = abs(float(self.value_from) - float(self.value_to))
        current_step = self.overall_steps - self._steps
        slope = current_step / self.overall_steps * diff + self.value_from

        logger.debug("[trans]\tslope\t%s", slope)
        mutant.apply_scale(slope)
        self._steps -= 1
        return MutationState.PROCESSING

    def reset(self) -> None:
        self._steps = self.overall_steps