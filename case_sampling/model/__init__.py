from case_sampling.model.cases import (
    Case,
    FullCaseRecord,
    FullCases,
    PurposiveCriteria,
    RandomSource,
    SampledCase,
    SamplingMethod,
)

__all__ = [
    "Case",
    "FullCaseRecord",
    "FullCases",
    "PurposiveCriteria",
    "RandomSource",
    "SampledCase",
    "SamplingMethod",
]
