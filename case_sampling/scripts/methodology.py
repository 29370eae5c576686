import math
from typing import Union

from case_sampling.model.cases import SamplingMethod
from case_sampling.scripts.parameter import methodology_domain_count


def generate_methodology_text(
    method: Union[SamplingMethod, str], n: int, total_cases: int
) -> str:
    """Methodology paragraph describing a sampling run, with citations.

    The wording is fixed per method so that exported write-ups cite the
    procedure consistently.

    Args:
        method: Sampling method (enum or its string value)
        n: Number of cases selected
        total_cases: Size of the pool of completed assessments

    Returns:
        One paragraph of methodological prose
    """
    if not isinstance(method, SamplingMethod):
        method = SamplingMethod.from_string(method)

    if method == SamplingMethod.MAXIMUM_VARIATION:
        return (
            f"Maximum variation sampling was employed to select {n} cases from a pool of "
            f"{total_cases} completed assessments. Cases were iteratively selected to "
            "maximise Euclidean distance in the multi-dimensional score space across all "
            f"{methodology_domain_count} assessment domains, ensuring the sample captures "
            "the widest possible range of organisational profiles and performance levels "
            "(Patton, 2015)."
        )
    elif method == SamplingMethod.EXTREME_DEVIANT:
        return (
            f"Extreme/deviant case sampling was used to identify {n} cases from "
            f"{total_cases} completed assessments. The sample comprises the "
            f"{math.ceil(n / 2)} lowest-scoring and {n // 2} highest-scoring "
            "organisations by overall assessment score, enabling analysis of factors "
            "differentiating high-performing WISEs from those in earlier stages of "
            "development (Flyvbjerg, 2006)."
        )
    elif method == SamplingMethod.TYPICAL:
        return (
            f"Typical case sampling was applied to select {n} cases from {total_cases} "
            "completed assessments. Cases closest to the mean score profile across all "
            "domains were selected using Euclidean distance, providing a sample "
            'representative of the "typical" WISE in the dataset (Patton, 2015).'
        )
    else:  # PURPOSIVE
        return (
            f"Purposive sampling was used to select {n} cases from {total_cases} "
            "completed assessments, filtered by specified criteria (country, sector, "
            "and/or organisation size). From the qualifying cases, a random subsample was "
            "drawn using Fisher-Yates shuffling to reduce selection bias within the "
            "purposive frame (Palinkas et al., 2015)."
        )
