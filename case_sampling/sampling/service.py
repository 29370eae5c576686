"""Sampling service for orchestrating case sampling runs.

This module provides the main entry points for the research layer to interact
with the sampling strategies.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Type, Union

from case_sampling.sampling.base import SamplingStrategy
from case_sampling.sampling.extreme_deviant import ExtremeDeviantStrategy
from case_sampling.sampling.maximum_variation import MaximumVariationStrategy
from case_sampling.sampling.purposive import PurposiveStrategy
from case_sampling.sampling.types import (
    Case,
    FullCases,
    PurposiveCriteria,
    RandomSource,
    SamplingInputs,
    SamplingMethod,
    SamplingResults,
)
from case_sampling.sampling.typical import TypicalCaseStrategy
from case_sampling.scripts.parameter import default_domain_keys, default_sample_count

logger = logging.getLogger("case_sampling.sampling.service")

# Registry of available strategies
_STRATEGY_REGISTRY: Dict[SamplingMethod, Type[SamplingStrategy]] = {
    SamplingMethod.MAXIMUM_VARIATION: MaximumVariationStrategy,
    SamplingMethod.EXTREME_DEVIANT: ExtremeDeviantStrategy,
    SamplingMethod.TYPICAL: TypicalCaseStrategy,
    SamplingMethod.PURPOSIVE: PurposiveStrategy,
}

# Cached strategy instances
_strategy_instances: Dict[SamplingMethod, SamplingStrategy] = {}


def get_sampling_strategy(method: SamplingMethod) -> SamplingStrategy:
    """Get the sampling strategy for a given method.

    Args:
        method: The sampling method

    Returns:
        The corresponding SamplingStrategy instance

    Raises:
        ValueError: If the method is not supported
    """
    if method not in _STRATEGY_REGISTRY:
        raise ValueError(f"Unsupported sampling method: {method}")

    # Use cached instance if available
    if method not in _strategy_instances:
        _strategy_instances[method] = _STRATEGY_REGISTRY[method]()

    return _strategy_instances[method]


def get_strategy_from_string(method_str: str) -> SamplingStrategy:
    """Get sampling strategy from string method name.

    Args:
        method_str: String name of sampling method (e.g., "typical")

    Returns:
        The corresponding SamplingStrategy instance
    """
    method = SamplingMethod.from_string(method_str)
    return get_sampling_strategy(method)


class SamplingService:
    """High-level service for case sampling.

    This service provides a simplified interface for the research layer,
    handling the conversion between request values and strategy inputs.
    """

    @staticmethod
    def create_inputs(
        method: Union[SamplingMethod, str],
        cases: Sequence[Case],
        count: int = default_sample_count,
        domain_keys: Optional[Sequence[str]] = None,
        criteria: Optional[Union[PurposiveCriteria, Mapping[str, Any]]] = None,
        full_cases: Optional[FullCases] = None,
        random_state: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> SamplingInputs:
        """Create SamplingInputs from request values.

        Args:
            method: Sampling method or its string value
            cases: Case pool
            count: Number of cases requested
            domain_keys: Domains spanning the score space (defaults to the
                assessment domains)
            criteria: Purposive criteria, as an object or a plain dict
            full_cases: Organisation records for purposive filtering
            random_state: Seed for the purposive shuffle
            rng: Explicit random source; takes precedence over random_state

        Returns:
            SamplingInputs populated from the request
        """
        if not isinstance(method, SamplingMethod):
            method = SamplingMethod.from_string(method)

        if not isinstance(criteria, PurposiveCriteria):
            criteria = PurposiveCriteria.from_dict(criteria)

        return SamplingInputs(
            sampling_method=method,
            cases=list(cases),
            count=count,
            domain_keys=list(default_domain_keys if domain_keys is None else domain_keys),
            criteria=criteria,
            full_cases=full_cases,
            random_state=random_state,
            rng=rng,
        )

    @staticmethod
    def calculate(inputs: SamplingInputs) -> SamplingResults:
        """Run a sampling calculation using the appropriate strategy.

        Args:
            inputs: Sampling inputs

        Returns:
            SamplingResults from the calculation
        """
        strategy = get_sampling_strategy(inputs.sampling_method)
        return strategy.calculate(inputs)

    @staticmethod
    def run(method: Union[SamplingMethod, str], cases: Sequence[Case], **kwargs) -> SamplingResults:
        """Create inputs and calculate in a single call.

        Keyword arguments are those of :meth:`create_inputs`.
        """
        inputs = SamplingService.create_inputs(method, cases, **kwargs)
        return SamplingService.calculate(inputs)

    @staticmethod
    def is_ready(inputs: SamplingInputs) -> bool:
        """Check if the inputs are ready for calculation.

        Args:
            inputs: Sampling inputs

        Returns:
            True if ready for calculation
        """
        strategy = get_sampling_strategy(inputs.sampling_method)
        return strategy.is_ready(inputs)

    @staticmethod
    def get_validation_errors(inputs: SamplingInputs) -> list:
        """Get validation errors for the given inputs.

        Args:
            inputs: Sampling inputs

        Returns:
            List of validation error messages
        """
        strategy = get_sampling_strategy(inputs.sampling_method)
        return strategy.validate_inputs(inputs)

    @staticmethod
    def get_available_methods() -> list:
        """Get list of available sampling methods.

        Returns:
            List of (method_value, display_name, description) tuples
        """
        methods = []
        for method in SamplingMethod:
            strategy = get_sampling_strategy(method)
            methods.append((method.value, strategy.display_name, strategy.description))
        return methods
