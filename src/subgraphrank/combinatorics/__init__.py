from .binomial import coefficient
from .cache import CoefficientCache
from .unrank import (
    Combination,
    check_rank,
    decode_rank,
    rank_one,
    unrank_one,
    validate_request,
)
from .batch import default_processes, unrank_all, unrank_many, unrank_parallel

__all__ = [
    "coefficient",
    "CoefficientCache",
    "Combination",
    "check_rank",
    "decode_rank",
    "rank_one",
    "unrank_one",
    "validate_request",
    "default_processes",
    "unrank_all",
    "unrank_many",
    "unrank_parallel",
]
