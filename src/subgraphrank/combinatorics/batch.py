from __future__ import annotations

from multiprocessing import Pool, cpu_count
from multiprocessing.pool import ThreadPool
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from .cache import CoefficientCache
from .unrank import Combination, check_rank, decode_rank, validate_request

MODES = ("process", "thread")

# Per-process worker state, set by _worker_init.
_BASE_SET: Sequence[Hashable] = ()
_K: int = 0
_CACHE: Optional[CoefficientCache] = None


def _worker_init(base_set: Sequence[Hashable], k: int) -> None:
    global _BASE_SET, _K, _CACHE
    _BASE_SET = base_set
    _K = k
    _CACHE = CoefficientCache()


def _worker(job: Tuple[int, int]) -> Tuple[int, Combination]:
    """Return (input_position, combination)."""
    pos, rank = job
    assert _CACHE is not None
    return pos, decode_rank(_BASE_SET, _K, rank, _CACHE.coefficient)


def default_processes() -> int:
    return max(1, cpu_count() - 1)


def _validated_ranks(n: int, k: int, ranks: Iterable[int]) -> List[int]:
    total = validate_request(n, k)
    return [check_rank(r, total) for r in ranks]


def unrank_all(
    base_set: Sequence[Hashable],
    k: int,
    *,
    cache: Optional[CoefficientCache] = None,
) -> List[Combination]:
    """
    Every k-combination of base_set, in rank order 0..C(n,k)-1.

    Runs sequentially with one cache for the whole batch; consecutive ranks
    share most of their (n, r) coefficients.
    """
    total = validate_request(len(base_set), k)
    if cache is None:
        cache = CoefficientCache()
    return [decode_rank(base_set, k, rank, cache.coefficient) for rank in range(total)]


def unrank_many(
    base_set: Sequence[Hashable],
    k: int,
    ranks: Iterable[int],
    *,
    processes: Optional[int] = 1,
    mode: str = "process",
    chunksize: int = 64,
    cache: Optional[CoefficientCache] = None,
) -> List[Combination]:
    """
    Unrank each entry of ranks; out[j] == unrank_one(base_set, k, ranks[j]).

    processes <= 1 runs in the calling thread with one cache. Otherwise:
      mode="process": multiprocessing.Pool, each worker with a private cache
                      (no lock contention, some recomputation). A cache
                      cannot cross process boundaries, so passing one
                      raises ValueError.
      mode="thread":  ThreadPool, all workers sharing one cache (the given
                      one, or a fresh one).
    Results are identical under every policy.
    """
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r}; expected one of {MODES}")
    base_set = list(base_set)
    rank_list = _validated_ranks(len(base_set), k, ranks)

    if processes is None:
        processes = default_processes()
    if mode == "process" and processes > 1 and cache is not None:
        raise ValueError(
            "a shared cache cannot be used with mode=\"process\"; "
            "use mode=\"thread\" or processes=1"
        )
    if processes <= 1 or len(rank_list) <= 1:
        if cache is None:
            cache = CoefficientCache()
        return [decode_rank(base_set, k, r, cache.coefficient) for r in rank_list]

    out: List[Optional[Combination]] = [None] * len(rank_list)
    jobs = list(enumerate(rank_list))

    if mode == "thread":
        shared = cache if cache is not None else CoefficientCache()

        def job(item: Tuple[int, int]) -> Tuple[int, Combination]:
            pos, rank = item
            return pos, decode_rank(base_set, k, rank, shared.coefficient)

        with ThreadPool(processes=processes) as pool:
            for pos, comb in pool.imap_unordered(job, jobs, chunksize=chunksize):
                out[pos] = comb
    else:
        with Pool(processes=processes, initializer=_worker_init, initargs=(base_set, k)) as pool:
            for pos, comb in pool.imap_unordered(_worker, jobs, chunksize=chunksize):
                out[pos] = comb

    return out  # type: ignore[return-value]


def unrank_parallel(
    base_set: Sequence[Hashable],
    k: int,
    *,
    processes: Optional[int] = None,
    mode: str = "process",
    chunksize: int = 64,
) -> List[Combination]:
    """Every k-combination of base_set in rank order, computed in parallel."""
    total = validate_request(len(base_set), k)
    return unrank_many(
        base_set,
        k,
        range(total),
        processes=processes,
        mode=mode,
        chunksize=chunksize,
    )
