from __future__ import annotations

import random
from collections import Counter

import pytest

from conftest import SequenceRandom

from case_sampling.scripts.distance import euclidean_distance, shuffle


def test_euclidean_distance_value() -> None:
    assert euclidean_distance({"x": 0}, {"x": 3, "y": 4}, ["x", "y"]) == pytest.approx(5.0)


def test_euclidean_distance_missing_key_counts_as_zero() -> None:
    assert euclidean_distance({"x": 2}, {}, ["x", "y"]) == pytest.approx(2.0)


def test_euclidean_distance_ignores_keys_outside_key_set() -> None:
    assert euclidean_distance({"x": 1, "z": 9}, {"x": 1}, ["x"]) == 0.0


def test_euclidean_distance_without_keys_is_zero() -> None:
    assert euclidean_distance({"x": 1}, {"x": 5}, []) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        ({"x": 1.5, "y": -2.0}, {"x": 0.25, "y": 4.0}),
        ({"x": 3.3}, {"y": 1.1}),
        ({}, {"x": 2.0, "y": 2.0}),
    ],
)
def test_euclidean_distance_is_symmetric(a, b) -> None:
    keys = ["x", "y"]
    assert euclidean_distance(a, b, keys) == euclidean_distance(b, a, keys)


def test_shuffle_returns_new_permutation() -> None:
    items = [1, 2, 3, 4, 5]
    result = shuffle(items, random.Random(3))

    assert sorted(result) == items
    assert items == [1, 2, 3, 4, 5]


def test_shuffle_draws_from_injected_source() -> None:
    # i=2 -> j=0, i=1 -> j=0
    assert shuffle(["a", "b", "c"], SequenceRandom([0.0])) == ["b", "c", "a"]


def test_shuffle_handles_tiny_inputs() -> None:
    assert shuffle([], random.Random(0)) == []
    assert shuffle(["only"], random.Random(0)) == ["only"]


def test_shuffle_reaches_every_permutation() -> None:
    rng = random.Random(2024)
    seen = Counter(tuple(shuffle([1, 2, 3], rng)) for _ in range(600))

    assert len(seen) == 6
    assert min(seen.values()) > 60
