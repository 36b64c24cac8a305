from __future__ import annotations

import math
import operator

from subgraphrank.errors import InvalidArguments


def _factor_range(lo: int, hi: int) -> set[int]:
    """Integers in [lo, hi] as a set (empty when lo > hi)."""
    return set(range(lo, hi + 1))


def coefficient(n: int, r: int) -> int:
    """
    Exact binomial coefficient C(n, r).

    Numerator factors are the integers in (r, n], denominator factors the
    integers in [1, n-r]. Factors present in both cancel, so only
    min(r, n-r) factors remain on each side and n! is never formed.
    """
    n = operator.index(n)
    r = operator.index(r)
    if n < 0 or r < 0 or r > n:
        raise InvalidArguments(n, r)

    numerator = _factor_range(r + 1, n)
    denominator = _factor_range(1, n - r)
    num_left = numerator - denominator
    den_left = denominator - numerator

    return math.prod(num_left) // math.prod(den_left)
