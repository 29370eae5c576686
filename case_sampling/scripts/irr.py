"""Inter-rater reliability for qualitative coding.

Two researchers code the same set of interview responses with tags. For
each tag the coding is reduced to a binary decision per response (tag
applied or not) and agreement is measured with Cohen's kappa.
"""

import logging
import math
from dataclasses import asdict, dataclass, field, fields
from typing import AbstractSet, Any, Dict, List, Mapping, Sequence

import pandas as pd

from case_sampling.scripts.parameter import kappa_bands, kappa_top_band
from case_sampling.scripts.statistics import round_half_up

logger = logging.getLogger("case_sampling.scripts.irr")


@dataclass
class KappaComponents:
    """Agreement figures for one pair of binary decision sequences."""

    observed: float
    expected: float
    kappa: float


@dataclass
class TagAgreement:
    """Agreement between the two raters on a single tag."""

    tag_name: str
    observed: float  # Proportion of agreement
    expected: float  # Agreement expected by chance
    kappa: float
    interpretation: str
    rater1_count: int
    rater2_count: int
    both_count: int
    total_responses: int


@dataclass
class IRRResult:
    """Inter-rater reliability over all tags."""

    overall_kappa: float
    overall_interpretation: str
    percentage_agreement: int
    total_shared_responses: int
    per_tag: List[TagAgreement] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_dataframe(self) -> pd.DataFrame:
        """Per-tag agreement table, one row per tag."""
        columns = [f.name for f in fields(TagAgreement)]
        return pd.DataFrame([asdict(t) for t in self.per_tag], columns=columns)


def interpret_kappa(kappa: float) -> str:
    """Landis & Koch label for a kappa value."""
    for upper, label in kappa_bands:
        if kappa < upper:
            return label
    return kappa_top_band


def cohens_kappa(rater1: Sequence[bool], rater2: Sequence[bool]) -> KappaComponents:
    """Cohen's kappa for two raters' binary decisions on the same items.

    Formula: κ = (p_o - p_e) / (1 - p_e)

    Where:
        - p_o = observed proportion of agreement
        - p_e = p_yes1 x p_yes2 + p_no1 x p_no2, agreement expected by chance

    Args:
        rater1: Decisions of the first rater
        rater2: Decisions of the second rater, aligned with ``rater1``

    Returns:
        KappaComponents with kappa rounded to 2 dp (1 when p_e is 1,
        all zeros when there are no items)
    """
    n = len(rater1)
    if n == 0:
        return KappaComponents(observed=0.0, expected=0.0, kappa=0.0)

    a = b = c = d = 0
    for r1, r2 in zip(rater1, rater2):
        if r1 and r2:
            a += 1
        elif r1 and not r2:
            b += 1
        elif not r1 and r2:
            c += 1
        else:
            d += 1

    observed = (a + d) / n
    p_yes1 = (a + b) / n
    p_yes2 = (a + c) / n
    p_no1 = (c + d) / n
    p_no2 = (b + d) / n
    expected = p_yes1 * p_yes2 + p_no1 * p_no2

    kappa = 1.0 if expected == 1 else (observed - expected) / (1 - expected)

    return KappaComponents(
        observed=observed, expected=expected, kappa=round_half_up(kappa)
    )


def calculate_irr(
    shared_response_ids: Sequence[str],
    rater1_tags: Mapping[str, AbstractSet[str]],
    rater2_tags: Mapping[str, AbstractSet[str]],
    all_tag_names: Sequence[str],
) -> IRRResult:
    """Compute per-tag and overall agreement between two raters.

    Args:
        shared_response_ids: Responses coded by both raters
        rater1_tags: Response id -> tags applied by the first rater
        rater2_tags: Response id -> tags applied by the second rater
        all_tag_names: Tags to evaluate

    Returns:
        IRRResult; the overall kappa is the unweighted mean of per-tag kappas
    """
    per_tag: List[TagAgreement] = []
    total_agreed = 0
    total_decisions = 0

    for tag_name in all_tag_names:
        r1_decisions = [tag_name in rater1_tags.get(rid, ()) for rid in shared_response_ids]
        r2_decisions = [tag_name in rater2_tags.get(rid, ()) for rid in shared_response_ids]

        components = cohens_kappa(r1_decisions, r2_decisions)

        per_tag.append(
            TagAgreement(
                tag_name=tag_name,
                observed=round_half_up(components.observed),
                expected=round_half_up(components.expected),
                kappa=components.kappa,
                interpretation=interpret_kappa(components.kappa),
                rater1_count=sum(r1_decisions),
                rater2_count=sum(r2_decisions),
                both_count=sum(1 for v1, v2 in zip(r1_decisions, r2_decisions) if v1 and v2),
                total_responses=len(shared_response_ids),
            )
        )

        total_agreed += sum(1 for v1, v2 in zip(r1_decisions, r2_decisions) if v1 == v2)
        total_decisions += len(shared_response_ids)

    percentage_agreement = (
        int(round_half_up(total_agreed / total_decisions * 100, 0))
        if total_decisions > 0
        else 0
    )

    valid_kappas = [t.kappa for t in per_tag if not math.isnan(t.kappa)]
    overall_kappa = (
        round_half_up(sum(valid_kappas) / len(valid_kappas)) if valid_kappas else 0.0
    )

    logger.debug(
        f"IRR over {len(shared_response_ids)} responses and {len(per_tag)} tags: "
        f"kappa={overall_kappa}, agreement={percentage_agreement}%"
    )

    return IRRResult(
        overall_kappa=overall_kappa,
        overall_interpretation=interpret_kappa(overall_kappa),
        percentage_agreement=percentage_agreement,
        total_shared_responses=len(shared_response_ids),
        per_tag=per_tag,
    )
