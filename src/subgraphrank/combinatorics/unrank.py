"""Combinatorial number system: rank <-> k-combination of an ordered base set.

Ranks enumerate the k-subsets of a base set in lexicographic order of
positions, so for base set [5, 8, 0, 1] and k=2:

    0 -> (5, 8)   1 -> (5, 0)   2 -> (5, 1)
    3 -> (8, 0)   4 -> (8, 1)   5 -> (0, 1)
"""
from __future__ import annotations

import operator
from typing import Callable, Hashable, Optional, Sequence, Tuple

from subgraphrank.errors import InvalidArguments, InvalidRank, InvalidSubsetSize
from .binomial import coefficient
from .cache import CoefficientCache

Combination = Tuple[Hashable, ...]
CoeffFn = Callable[[int, int], int]


def validate_request(n: int, k: int) -> int:
    """Check 0 < k <= n and return the number of combinations C(n, k)."""
    k = operator.index(k)
    if k <= 0 or k > n:
        raise InvalidSubsetSize(k, n)
    return coefficient(n, k)


def check_rank(rank: int, total: int) -> int:
    rank = operator.index(rank)
    if rank < 0 or rank >= total:
        raise InvalidRank(rank, total)
    return rank


def _coeff_fn(cache: Optional[CoefficientCache]) -> CoeffFn:
    return cache.coefficient if cache is not None else coefficient


def decode_rank(
    base_set: Sequence[Hashable],
    k: int,
    rank: int,
    coeff: CoeffFn = coefficient,
) -> Combination:
    """
    Greedy digit-by-digit decode. Assumes k and rank were already validated.

    At position i there are C(n-i-1, k'-1) combinations that take base_set[i]
    (k' = elements still to choose). If rank falls among them the element is
    taken; otherwise those combinations all rank before ours and are skipped.
    """
    n = len(base_set)
    out = []
    remaining = k
    i = 0
    while remaining:
        c = coeff(n - i - 1, remaining - 1)
        if rank < c:
            out.append(base_set[i])
            remaining -= 1
        else:
            rank -= c
        i += 1
    return tuple(out)


def unrank_one(
    base_set: Sequence[Hashable],
    k: int,
    rank: int,
    cache: Optional[CoefficientCache] = None,
) -> Combination:
    """
    Return the k-combination of base_set at lexicographic position rank.

    Raises InvalidSubsetSize unless 0 < k <= len(base_set), and InvalidRank
    unless 0 <= rank < C(len(base_set), k).
    Without a cache every coefficient is recomputed.
    """
    total = validate_request(len(base_set), k)
    rank = check_rank(rank, total)
    return decode_rank(base_set, k, rank, _coeff_fn(cache))


def rank_one(
    base_set: Sequence[Hashable],
    combination: Sequence[Hashable],
    cache: Optional[CoefficientCache] = None,
) -> int:
    """
    Inverse of unrank_one: position of combination among the
    len(combination)-subsets of base_set.

    The combination must be a subsequence of base_set in base_set order.
    """
    n = len(base_set)
    k = len(combination)
    validate_request(n, k)
    coeff = _coeff_fn(cache)

    rank = 0
    remaining = k
    j = 0
    for i, item in enumerate(base_set):
        if remaining == 0 or n - i < remaining:
            break
        if item == combination[j]:
            j += 1
            remaining -= 1
        else:
            rank += coeff(n - i - 1, remaining - 1)
    if remaining:
        raise InvalidArguments(
            n, k,
            f"{tuple(combination)!r} is not an ordered sub-sequence of the base set",
        )
    return rank
