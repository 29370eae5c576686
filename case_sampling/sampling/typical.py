"""Typical case sampling strategy implementation."""

from typing import List

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.types import SampledCase, SamplingInputs, SamplingMethod
from case_sampling.scripts.selection import typical_cases


class TypicalCaseStrategy(SamplingStrategy):
    """Strategy for typical case sampling.

    Ranks cases by distance to the pool's mean domain profile and keeps
    the closest ones.
    """

    @property
    def method(self) -> SamplingMethod:
        return SamplingMethod.TYPICAL

    @property
    def display_name(self) -> str:
        return "Typical Case"

    @property
    def description(self) -> str:
        return (
            "Selects cases closest to the mean score profile. Best for understanding "
            'the "average" WISE experience.'
        )

    @property
    def requires_domain_keys(self) -> bool:
        return True

    def select(self, inputs: SamplingInputs) -> List[SampledCase]:
        return typical_cases(inputs.cases, inputs.count, inputs.domain_keys)
