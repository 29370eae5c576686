"""Case sampling strategies module.

Each sampling method is implemented as a Strategy class that handles:
- Input validation
- Case selection with a justification per case
- Methodology text for research write-ups

Usage:
    from case_sampling.sampling import get_sampling_strategy, SamplingMethod

    strategy = get_sampling_strategy(SamplingMethod.TYPICAL)
    if strategy.is_ready(inputs):
        results = strategy.calculate(inputs)
"""

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.service import (
    SamplingService,
    get_sampling_strategy,
    get_strategy_from_string,
)
from case_sampling.sampling.types import (
    Case,
    FullCaseRecord,
    PurposiveCriteria,
    SampledCase,
    SamplingInputs,
    SamplingMethod,
    SamplingResults,
)

__all__ = [
    "SamplingStrategy",
    "SamplingMethod",
    "SamplingInputs",
    "SamplingResults",
    "SamplingService",
    "Case",
    "SampledCase",
    "FullCaseRecord",
    "PurposiveCriteria",
    "get_sampling_strategy",
    "get_strategy_from_string",
]
