"""Purposive sampling strategy implementation.

Purposive sampling restricts the frame to organisations matching the
requested country, sector and/or size, then draws a random subsample from
that frame to reduce selection bias within it.
"""

import logging
from typing import List

import numpy as np

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.types import (
    RandomSource,
    SampledCase,
    SamplingInputs,
    SamplingMethod,
)
from case_sampling.scripts.selection import purposive_sampling

logger = logging.getLogger("case_sampling.sampling.purposive")


class PurposiveStrategy(SamplingStrategy):
    """Strategy for purposive sampling.

    The random source is taken from ``inputs.rng`` when supplied, otherwise a
    dedicated :class:`numpy.random.Generator` is seeded from
    ``inputs.random_state`` so runs do not touch global RNG state.
    """

    @property
    def method(self) -> SamplingMethod:
        return SamplingMethod.PURPOSIVE

    @property
    def display_name(self) -> str:
        return "Purposive"

    @property
    def description(self) -> str:
        return (
            "Filters by country, sector, or size, then randomly samples from qualifying "
            "cases. Best when targeting specific populations."
        )

    @property
    def requires_full_cases(self) -> bool:
        return True

    def validate_inputs(self, inputs: SamplingInputs) -> List[str]:
        """Validate inputs for purposive sampling."""
        errors = self._validate_common_inputs(inputs)

        if inputs.full_cases is None:
            errors.append("Purposive sampling requires organisation records to filter on")

        return errors

    def random_source(self, inputs: SamplingInputs) -> RandomSource:
        if inputs.rng is not None:
            return inputs.rng
        return np.random.default_rng(inputs.random_state)

    def select(self, inputs: SamplingInputs) -> List[SampledCase]:
        if not inputs.criteria.active():
            logger.info("Purposive sampling without criteria draws from the whole pool")

        return purposive_sampling(
            inputs.cases,
            inputs.count,
            inputs.criteria,
            inputs.full_cases,
            self.random_source(inputs),
        )
