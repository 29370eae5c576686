"""Type definitions for case sampling strategies.

Contains data classes that define the inputs and outputs for all sampling methods.
This provides a clear contract between the research layer and the selection logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from case_sampling.model.cases import (
    Case,
    FullCaseRecord,
    FullCases,
    PurposiveCriteria,
    RandomSource,
    SampledCase,
    SamplingMethod,
)
from case_sampling.scripts.parameter import default_sample_count

__all__ = [
    "Case",
    "FullCaseRecord",
    "FullCases",
    "PurposiveCriteria",
    "RandomSource",
    "SampledCase",
    "SamplingInputs",
    "SamplingMethod",
    "SamplingResults",
]


@dataclass
class SamplingInputs:
    """Input parameters for a sampling run.

    This is a unified input structure that contains all possible parameters.
    Each strategy will use only the parameters relevant to it.
    """

    # Common parameters
    sampling_method: SamplingMethod
    cases: List[Case] = field(default_factory=list)
    count: int = default_sample_count

    # Maximum variation / typical
    domain_keys: List[str] = field(default_factory=list)

    # Purposive-specific
    criteria: PurposiveCriteria = field(default_factory=PurposiveCriteria)
    full_cases: Optional[FullCases] = None
    random_state: Optional[int] = None  # Seed used when no rng is given
    rng: Optional[RandomSource] = None

    @property
    def total_pool(self) -> int:
        return len(self.cases)


@dataclass
class SamplingResults:
    """Results from a sampling run.

    Failed runs carry ``success=False`` and an ``error_message`` instead of cases.
    """

    # Metadata
    sampling_method: SamplingMethod
    success: bool = True
    error_message: Optional[str] = None

    # Core results
    cases: List[SampledCase] = field(default_factory=list)
    methodology_text: str = ""
    total_pool: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a JSON-friendly dictionary."""
        return {
            "sampling_method": self.sampling_method.value,
            "success": self.success,
            "error_message": self.error_message,
            "cases": [
                {
                    "assessment_id": c.assessment_id,
                    "label": c.label,
                    "overall_score": c.overall_score,
                    "domain_scores": dict(c.domain_scores),
                    "context": c.context,
                    "justification": c.justification,
                }
                for c in self.cases
            ],
            "methodology_text": self.methodology_text,
            "total_pool": self.total_pool,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Selected cases as a table, one row per case in selection order."""
        columns = ["assessment_id", "label", "overall_score", "context", "justification"]
        return pd.DataFrame(
            [[getattr(c, col) for col in columns] for c in self.cases],
            columns=columns,
        )

    @classmethod
    def error(
        cls, method: SamplingMethod, message: str, total_pool: int = 0
    ) -> "SamplingResults":
        """Create an error result."""
        return cls(
            sampling_method=method,
            success=False,
            error_message=message,
            total_pool=total_pool,
        )
