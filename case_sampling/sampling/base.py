"""Base class for case sampling strategies.

Defines the interface that all sampling strategies must implement.
"""

import logging
from abc import ABC, abstractmethod
from numbers import Integral
from typing import List

from case_sampling.sampling.types import (
    Case,
    SampledCase,
    SamplingInputs,
    SamplingMethod,
    SamplingResults,
)
from case_sampling.scripts.methodology import generate_methodology_text

logger = logging.getLogger("case_sampling.sampling")


class SamplingStrategy(ABC):
    """Abstract base class for case sampling strategies.

    Each sampling method (maximum variation, extreme/deviant, typical,
    purposive) implements this interface. Strategies hold no state between
    runs, so a single cached instance can serve concurrent callers.
    """

    @property
    @abstractmethod
    def method(self) -> SamplingMethod:
        """Return the sampling method this strategy handles."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this sampling method."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of when to use this sampling method."""
        pass

    @property
    def requires_domain_keys(self) -> bool:
        """Whether this method measures distances in domain-score space."""
        return False

    @property
    def requires_full_cases(self) -> bool:
        """Whether this method needs the organisation side-table."""
        return False

    @abstractmethod
    def select(self, inputs: SamplingInputs) -> List[SampledCase]:
        """Run the selection for validated inputs.

        Args:
            inputs: Validated sampling inputs

        Returns:
            Selected cases in selection order
        """
        pass

    def validate_inputs(self, inputs: SamplingInputs) -> List[str]:
        """Validate inputs for this sampling method.

        Args:
            inputs: Sampling inputs to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        return self._validate_common_inputs(inputs)

    def calculate(self, inputs: SamplingInputs) -> SamplingResults:
        """Select cases and describe the procedure.

        Args:
            inputs: Sampling inputs

        Returns:
            SamplingResults with the selected cases and methodology text
        """
        # Validate first
        errors = self.validate_inputs(inputs)
        if errors:
            return SamplingResults.error(
                self.method, "; ".join(errors), total_pool=inputs.total_pool
            )

        try:
            selected = self.select(inputs)
            logger.info(
                f"{self.display_name}: selected {len(selected)} of "
                f"{inputs.total_pool} cases (requested {inputs.count})"
            )

            return SamplingResults(
                sampling_method=self.method,
                success=True,
                cases=selected,
                methodology_text=generate_methodology_text(
                    self.method, len(selected), inputs.total_pool
                ),
                total_pool=inputs.total_pool,
            )

        except Exception as e:
            logger.error(f"Error in {self.method.value} sampling: {e}")
            return SamplingResults.error(
                self.method, str(e), total_pool=inputs.total_pool
            )

    def is_ready(self, inputs: SamplingInputs) -> bool:
        """Check if inputs are ready for calculation.

        Args:
            inputs: Sampling inputs to check

        Returns:
            True if ready for calculation
        """
        errors = self.validate_inputs(inputs)
        return len(errors) == 0

    def _validate_common_inputs(self, inputs: SamplingInputs) -> List[str]:
        """Validate inputs common to all sampling methods.

        Args:
            inputs: Sampling inputs to validate

        Returns:
            List of validation error messages
        """
        errors = []

        if isinstance(inputs.count, bool) or not isinstance(inputs.count, Integral):
            errors.append("Number of cases must be a whole number")

        if not all(isinstance(c, Case) for c in inputs.cases):
            errors.append("Case pool must only contain Case records")

        if self.requires_domain_keys and not inputs.domain_keys:
            logger.warning(
                f"{self.display_name} run without domain keys; "
                "all distances will be zero"
            )

        return errors
