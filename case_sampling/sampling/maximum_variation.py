"""Maximum variation sampling strategy implementation.

Maximum variation sampling picks cases that are as different from each
other as possible, so the follow-up interviews cover the full range of
organisational profiles rather than clustering around one kind of case.
"""

from typing import List

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.types import SampledCase, SamplingInputs, SamplingMethod
from case_sampling.scripts.selection import maximum_variation


class MaximumVariationStrategy(SamplingStrategy):
    """Strategy for maximum variation sampling.

    Maximum variation sampling is ideal when:
    - You want the widest spread of domain-score profiles
    - Patterns that hold across very different cases are of interest
    """

    @property
    def method(self) -> SamplingMethod:
        return SamplingMethod.MAXIMUM_VARIATION

    @property
    def display_name(self) -> str:
        return "Maximum Variation"

    @property
    def description(self) -> str:
        return (
            "Selects cases that maximise diversity across all domain scores using "
            "Euclidean distance. Best for capturing the full range of organisational "
            "profiles."
        )

    @property
    def requires_domain_keys(self) -> bool:
        return True

    def select(self, inputs: SamplingInputs) -> List[SampledCase]:
        return maximum_variation(inputs.cases, inputs.count, inputs.domain_keys)
