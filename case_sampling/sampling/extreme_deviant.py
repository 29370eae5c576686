"""Extreme/deviant case sampling strategy implementation.

Selects the lowest- and highest-scoring organisations. When an odd number
of cases is requested the extra case comes from the low end.
"""

from typing import List

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.types import SampledCase, SamplingInputs, SamplingMethod
from case_sampling.scripts.selection import extreme_deviant


class ExtremeDeviantStrategy(SamplingStrategy):
    """Strategy for extreme/deviant case sampling."""

    @property
    def method(self) -> SamplingMethod:
        return SamplingMethod.EXTREME_DEVIANT

    @property
    def display_name(self) -> str:
        return "Extreme/Deviant Case"

    @property
    def description(self) -> str:
        return (
            "Selects the highest and lowest scoring cases. Best for understanding what "
            "differentiates top performers from those in early stages."
        )

    def select(self, inputs: SamplingInputs) -> List[SampledCase]:
        return extreme_deviant(inputs.cases, inputs.count)
