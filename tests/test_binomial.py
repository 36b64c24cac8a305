"""Tests for subgraphrank.combinatorics.binomial."""
import math

import pytest

from subgraphrank.combinatorics.binomial import coefficient
from subgraphrank.errors import InvalidArguments, UnrankError


@pytest.mark.parametrize(
    "n, r, expected",
    [
        (2, 1, 2),
        (3, 1, 3),
        (3, 2, 3),
        (2, 0, 1),
        (20, 5, 15504),
        (40, 2, 780),
        (100, 10, 17310309456440),
    ],
)
def test_coefficient_known_values(n, r, expected):
    assert coefficient(n, r) == expected


def test_coefficient_boundaries():
    for n in range(0, 12):
        assert coefficient(n, 0) == 1
        assert coefficient(n, n) == 1


def test_coefficient_symmetry():
    for n in range(0, 15):
        for r in range(0, n + 1):
            assert coefficient(n, r) == coefficient(n, n - r)


def test_coefficient_matches_math_comb():
    for n in range(0, 30):
        for r in range(0, n + 1):
            assert coefficient(n, r) == math.comb(n, r)


def test_coefficient_beyond_64_bits():
    value = coefficient(200, 100)
    assert value == math.comb(200, 100)
    assert value > 2**64


# --- errors ---

def test_coefficient_r_greater_than_n():
    with pytest.raises(InvalidArguments) as exc:
        coefficient(3, 4)
    assert exc.value.n == 3
    assert exc.value.r == 4


def test_coefficient_negative_arguments():
    with pytest.raises(InvalidArguments):
        coefficient(-1, 0)
    with pytest.raises(InvalidArguments):
        coefficient(5, -2)


def test_coefficient_error_is_value_error():
    with pytest.raises(ValueError):
        coefficient(1, 2)
    assert issubclass(InvalidArguments, UnrankError)


def test_coefficient_rejects_non_integers():
    with pytest.raises(TypeError):
        coefficient(5.0, 2)
