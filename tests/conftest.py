from __future__ import annotations

import pytest

from case_sampling.model.cases import Case, FullCaseRecord

DOMAIN_KEYS = ["governance", "employment", "social"]


class SequenceRandom:
    """Random source replaying fixed values, cycling when exhausted."""

    def __init__(self, values):
        self._values = list(values)
        self._i = 0

    def random(self) -> float:
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


def make_case(assessment_id: str, overall: float, **scores: float) -> Case:
    return Case(
        assessment_id=assessment_id,
        label=f"Org {assessment_id}",
        overall_score=overall,
        domain_scores=scores,
        context=f"context {assessment_id}",
    )


@pytest.fixture
def pool() -> list[Case]:
    return [
        make_case("a", 2.1, governance=2.0, employment=2.5, social=1.8),
        make_case("b", 4.6, governance=4.8, employment=4.5, social=4.4),
        make_case("c", 1.2, governance=1.0, employment=1.4, social=1.1),
        make_case("d", 3.0, governance=3.1, employment=2.9, social=3.0),
        make_case("e", 3.3, governance=1.0, employment=4.9, social=3.9),
        make_case("f", 2.8, governance=2.7, employment=3.0),
        make_case("g", 3.9, governance=4.0, employment=3.6, social=4.1),
    ]


@pytest.fixture
def full_cases() -> dict[str, FullCaseRecord]:
    records = [
        FullCaseRecord("a", country="FR", sector="recycling", size="small"),
        FullCaseRecord("b", country="FR", sector="catering", size="medium"),
        FullCaseRecord("c", country="FR", sector="recycling", size="medium"),
        FullCaseRecord("d", country="BE", sector="recycling", size="small"),
        FullCaseRecord("e", country="fr", sector="recycling", size="small"),
        FullCaseRecord("f", country="FR", sector="recycling", size="large"),
    ]
    return {r.assessment_id: r for r in records}
