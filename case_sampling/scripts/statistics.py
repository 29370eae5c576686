import math
from typing import Dict, Mapping, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from case_sampling.scripts.parameter import display_decimals, score_max, score_min


def round_half_up(value: float, decimals: int = display_decimals) -> float:
    """Round to ``decimals`` places with halves going towards +infinity.

    Matches the rounding of the figures shown in the research dashboard,
    unlike the built-in ``round`` which rounds halves to even.
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def median(values: Sequence[float]) -> float:
    """Median, 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.median(np.asarray(values, dtype=float)))


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 denominator), 0 below two values."""
    if len(values) < 2:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float), ddof=1))


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation over the common prefix of ``x`` and ``y``.

    Returns 0 when fewer than three pairs are available or when either
    series has no variance.
    """
    n = min(len(x), len(y))
    if n < 3:
        return 0.0

    xs = np.asarray(x[:n], dtype=float)
    ys = np.asarray(y[:n], dtype=float)
    if np.all(xs == xs[0]) or np.all(ys == ys[0]):
        return 0.0

    r, _ = stats.pearsonr(xs, ys)
    return float(r)


def correlation_matrix(
    domain_scores_by_assessment: Sequence[Mapping[str, float]],
    domain_keys: Sequence[str],
) -> pd.DataFrame:
    """Pairwise Pearson correlations between domains.

    Args:
        domain_scores_by_assessment: One domain-score mapping per assessment
        domain_keys: Domains to correlate, in display order

    Returns:
        Square DataFrame indexed and labelled by domain key, rounded to 2 dp
    """
    columns: Dict[str, list] = {
        key: [scores.get(key, 0.0) for scores in domain_scores_by_assessment]
        for key in domain_keys
    }

    matrix = pd.DataFrame(index=list(domain_keys), columns=list(domain_keys), dtype=float)
    for dk1 in domain_keys:
        for dk2 in domain_keys:
            matrix.loc[dk1, dk2] = round_half_up(
                pearson_correlation(columns[dk1], columns[dk2])
            )
    return matrix


def histogram(
    values: Sequence[float],
    bins: int = 5,
    min_value: float = score_min,
    max_value: float = score_max,
) -> pd.DataFrame:
    """Count values into equal-width bins over ``[min_value, max_value]``.

    Values below the range are ignored; values at or above the upper edge
    of the last bin are counted in it.

    Returns:
        DataFrame with columns: bin_start, bin_end, count
    """
    bin_width = (max_value - min_value) / bins
    counts = [0] * bins

    for v in values:
        bin_idx = min(math.floor((v - min_value) / bin_width), bins - 1)
        if 0 <= bin_idx < bins:
            counts[bin_idx] += 1

    return pd.DataFrame(
        {
            "bin_start": [round_half_up(min_value + i * bin_width) for i in range(bins)],
            "bin_end": [round_half_up(min_value + (i + 1) * bin_width) for i in range(bins)],
            "count": counts,
        }
    )
