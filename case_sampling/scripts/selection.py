"""Case selection functions for qualitative follow-up.

Each function is a pure selection over an already loaded pool of
:class:`~case_sampling.model.cases.Case` objects and returns new
:class:`~case_sampling.model.cases.SampledCase` objects in selection order.

Shared rules:

- ``n <= 0`` or an empty pool returns an empty list.
- A pool no larger than ``n`` is returned whole, in pool order, with the
  justification ``"All available cases selected"``. Purposive sampling
  applies this to its filtered frame, which it still shuffles.
"""

import logging
import math
from collections.abc import Mapping
from typing import Dict, List, Sequence

import numpy as np

from case_sampling.model.cases import (
    Case,
    FullCaseRecord,
    FullCases,
    PurposiveCriteria,
    RandomSource,
    SampledCase,
)
from case_sampling.scripts.distance import distances_to, score_matrix, shuffle
from case_sampling.scripts.statistics import mean

logger = logging.getLogger("case_sampling.scripts.selection")

ALL_CASES_JUSTIFICATION = "All available cases selected"
ANCHOR_JUSTIFICATION = "Highest overall score — initial anchor for maximum variation"


def _select_all(cases: Sequence[Case]) -> List[SampledCase]:
    return [SampledCase.from_case(c, ALL_CASES_JUSTIFICATION) for c in cases]


def maximum_variation(
    cases: Sequence[Case], n: int, domain_keys: Sequence[str]
) -> List[SampledCase]:
    """Greedy farthest-point selection in domain-score space.

    The highest overall score is the anchor. Each following pick is the
    candidate whose distance to its nearest selected case is largest.

    Candidates are kept in descending ``overall_score`` order (stable, so
    equal scores keep pool order). Both the anchor and every distance tie
    go to the first candidate in that order.

    Args:
        cases: Case pool
        n: Number of cases to select
        domain_keys: Ordered domains spanning the score space

    Returns:
        Selected cases, anchor first, then in pick order
    """
    if n <= 0 or not cases:
        return []
    if len(cases) <= n:
        return _select_all(cases)

    remaining = sorted(cases, key=lambda c: c.overall_score, reverse=True)
    anchor = remaining.pop(0)
    selected = [SampledCase.from_case(anchor, ANCHOR_JUSTIFICATION)]

    matrix = score_matrix(remaining, domain_keys)
    anchor_vec = score_matrix([anchor], domain_keys)[0]
    # Distance from each remaining candidate to its nearest selected case
    nearest = distances_to(matrix, anchor_vec)

    while len(selected) < n and remaining:
        best_idx = int(np.argmax(nearest))
        best_dist = float(nearest[best_idx])

        picked = remaining.pop(best_idx)
        picked_vec = matrix[best_idx]
        matrix = np.delete(matrix, best_idx, axis=0)
        nearest = np.delete(nearest, best_idx)
        nearest = np.minimum(nearest, distances_to(matrix, picked_vec))

        selected.append(
            SampledCase.from_case(
                picked,
                "Maximises distance from existing selections "
                f"(min Euclidean distance: {best_dist:.2f})",
            )
        )

    logger.debug(
        f"Maximum variation selected {len(selected)} of {len(cases)} cases "
        f"over {len(domain_keys)} domains"
    )
    return selected


def extreme_deviant(cases: Sequence[Case], n: int) -> List[SampledCase]:
    """Bottom ``ceil(n/2)`` and top ``floor(n/2)`` cases by overall score.

    Low-scoring cases come first, lowest score first, followed by the
    high-scoring cases in ascending score order. The concatenation is
    truncated to ``n``; no other deduplication is attempted.
    """
    if n <= 0 or not cases:
        return []
    if len(cases) <= n:
        return _select_all(cases)

    ordered = sorted(cases, key=lambda c: c.overall_score)
    bottom = ordered[: math.ceil(n / 2)]
    top = ordered[len(ordered) - n // 2 :]

    selected = [
        SampledCase.from_case(
            c,
            f"Low-scoring case (score: {c.overall_score:.2f}) — bottom of distribution",
        )
        for c in bottom
    ] + [
        SampledCase.from_case(
            c,
            f"High-scoring case (score: {c.overall_score:.2f}) — top of distribution",
        )
        for c in top
    ]
    return selected[:n]


def typical_cases(
    cases: Sequence[Case], n: int, domain_keys: Sequence[str]
) -> List[SampledCase]:
    """Cases closest to the pool's mean domain profile.

    Ties on distance keep pool order.
    """
    if n <= 0 or not cases:
        return []
    if len(cases) <= n:
        return _select_all(cases)

    mean_scores: Dict[str, float] = {
        dk: mean([c.score(dk) for c in cases]) for dk in domain_keys
    }
    matrix = score_matrix(cases, domain_keys)
    centre = np.array([mean_scores[dk] for dk in domain_keys], dtype=float)
    distances = distances_to(matrix, centre)

    order = sorted(range(len(cases)), key=lambda i: distances[i])
    return [
        SampledCase.from_case(
            cases[i],
            f"Closest to mean score profile (distance: {distances[i]:.2f})",
        )
        for i in order[:n]
    ]


def _lookup(full_cases: FullCases) -> Mapping[str, FullCaseRecord]:
    if isinstance(full_cases, Mapping):
        return full_cases
    return {record.assessment_id: record for record in full_cases}


def purposive_sampling(
    cases: Sequence[Case],
    n: int,
    criteria: PurposiveCriteria,
    full_cases: FullCases,
    rng: RandomSource,
) -> List[SampledCase]:
    """Random subsample of the cases matching every supplied criterion.

    Args:
        cases: Case pool
        n: Number of cases to select
        criteria: Country / sector / size filter; empty fields match anything
        full_cases: Organisation records keyed by ``assessment_id`` (or an
            iterable of records). Cases without a record are excluded.
        rng: Random source driving the shuffle

    Returns:
        Up to ``n`` matching cases in shuffled order, all sharing one
        justification listing the criteria
    """
    if n <= 0 or not cases:
        return []

    records = _lookup(full_cases)
    frame = [
        c
        for c in cases
        if c.assessment_id in records and criteria.matches(records[c.assessment_id])
    ]
    logger.debug(
        f"Purposive frame holds {len(frame)} of {len(cases)} cases "
        f"for criteria [{criteria.describe()}]"
    )

    justification = (
        f"Randomly selected from cases matching criteria: {criteria.describe()}"
    )
    return [SampledCase.from_case(c, justification) for c in shuffle(frame, rng)[:n]]
