from __future__ import annotations

import pytest

from case_sampling.scripts.irr import calculate_irr, cohens_kappa, interpret_kappa


@pytest.fixture
def coding():
    responses = ["r1", "r2", "r3", "r4"]
    rater1 = {"r1": {"barrier"}, "r2": {"barrier", "support"}, "r3": set(), "r4": {"support"}}
    rater2 = {"r1": {"barrier"}, "r2": {"barrier"}, "r3": {"support"}, "r4": {"support"}}
    return responses, rater1, rater2


@pytest.mark.parametrize(
    "kappa, label",
    [
        (-0.1, "Poor"),
        (0.0, "Slight"),
        (0.2, "Slight"),
        (0.21, "Fair"),
        (0.6, "Moderate"),
        (0.8, "Substantial"),
        (0.81, "Almost Perfect"),
        (1.0, "Almost Perfect"),
    ],
)
def test_interpret_kappa_bands(kappa, label) -> None:
    assert interpret_kappa(kappa) == label


def test_cohens_kappa_perfect_agreement() -> None:
    result = cohens_kappa([True, False, True, False], [True, False, True, False])

    assert result.observed == 1.0
    assert result.expected == pytest.approx(0.5)
    assert result.kappa == 1.0


def test_cohens_kappa_chance_agreement_is_zero() -> None:
    result = cohens_kappa([True, True, False, False], [True, False, True, False])

    assert result.observed == pytest.approx(0.5)
    assert result.kappa == 0.0


def test_cohens_kappa_rounds_to_two_decimals() -> None:
    result = cohens_kappa([True, True, True, False, False], [True, True, False, False, False])

    assert result.observed == pytest.approx(0.8)
    assert result.expected == pytest.approx(0.48)
    assert result.kappa == 0.62


def test_cohens_kappa_when_chance_agreement_is_certain() -> None:
    assert cohens_kappa([True, True], [True, True]).kappa == 1.0


def test_cohens_kappa_without_items() -> None:
    result = cohens_kappa([], [])
    assert (result.observed, result.expected, result.kappa) == (0.0, 0.0, 0.0)


def test_calculate_irr_per_tag_and_overall(coding) -> None:
    responses, rater1, rater2 = coding
    result = calculate_irr(responses, rater1, rater2, ["barrier", "support"])

    barrier, support = result.per_tag
    assert barrier.kappa == 1.0
    assert barrier.interpretation == "Almost Perfect"
    assert (barrier.rater1_count, barrier.rater2_count, barrier.both_count) == (2, 2, 2)
    assert support.kappa == 0.0
    assert support.observed == 0.5
    assert (support.rater1_count, support.rater2_count, support.both_count) == (2, 2, 1)
    assert support.total_responses == 4

    assert result.percentage_agreement == 75
    assert result.overall_kappa == 0.5
    assert result.overall_interpretation == "Moderate"
    assert result.total_shared_responses == 4


def test_calculate_irr_treats_uncoded_responses_as_no_tags(coding) -> None:
    responses, rater1, rater2 = coding
    del rater2["r3"]
    result = calculate_irr(responses, rater1, rater2, ["support"])

    assert result.per_tag[0].rater2_count == 1


def test_calculate_irr_without_tags() -> None:
    result = calculate_irr(["r1"], {}, {}, [])

    assert result.overall_kappa == 0.0
    assert result.percentage_agreement == 0
    assert result.per_tag == []


def test_irr_result_table(coding) -> None:
    responses, rater1, rater2 = coding
    result = calculate_irr(responses, rater1, rater2, ["barrier", "support"])

    df = result.to_dataframe()
    assert list(df["tag_name"]) == ["barrier", "support"]
    assert result.to_dict()["per_tag"][1]["tag_name"] == "support"
