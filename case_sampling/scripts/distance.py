import math
from typing import List, Mapping, Sequence, TypeVar

import numpy as np

from case_sampling.model.cases import Case, RandomSource

T = TypeVar("T")


def score_vector(scores: Mapping[str, float], domain_keys: Sequence[str]) -> np.ndarray:
    """Domain scores laid out in ``domain_keys`` order, 0 for missing domains."""
    return np.array([float(scores.get(k, 0.0)) for k in domain_keys], dtype=float)


def score_matrix(cases: Sequence[Case], domain_keys: Sequence[str]) -> np.ndarray:
    """Stack the score vectors of ``cases`` into a (cases x domains) array."""
    return np.array(
        [score_vector(c.domain_scores, domain_keys) for c in cases], dtype=float
    ).reshape(len(cases), len(domain_keys))


def euclidean_distance(
    a: Mapping[str, float], b: Mapping[str, float], domain_keys: Sequence[str]
) -> float:
    """Euclidean distance between two domain-score maps.

    Formula: d = √(Σ (a_k - b_k)²) over ``domain_keys``

    The key set is supplied by the caller so every comparison in a run has
    the same dimensionality. A domain missing from either map counts as 0.

    Args:
        a: Domain scores of the first case
        b: Domain scores of the second case
        domain_keys: Ordered domains to compare over

    Returns:
        Distance (0 when ``domain_keys`` is empty)
    """
    diff = score_vector(a, domain_keys) - score_vector(b, domain_keys)
    return float(np.sqrt(np.sum(diff**2)))


def distances_to(matrix: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Euclidean distance from every row of ``matrix`` to ``point``."""
    return np.sqrt(np.sum((matrix - point) ** 2, axis=1))


def shuffle(items: Sequence[T], rng: RandomSource) -> List[T]:
    """Fisher-Yates shuffle returning a new list.

    Every permutation is equally likely provided ``rng.random()`` is uniform
    on [0, 1).
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
