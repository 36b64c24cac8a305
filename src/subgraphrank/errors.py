from __future__ import annotations


class UnrankError(ValueError):
    """Base class for invalid unranking and sampling requests."""


class InvalidArguments(UnrankError):
    """Binomial coefficient requested outside 0 <= r <= n."""

    def __init__(self, n: int, r: int, message: str | None = None):
        self.n = n
        self.r = r
        super().__init__(message or f"C(n, r) is undefined for n={n}, r={r} (need 0 <= r <= n)")


class InvalidSubsetSize(UnrankError):
    """Subset size k is not in 1..n."""

    def __init__(self, k: int, n: int):
        self.k = k
        self.n = n
        super().__init__(f"subset size k={k} is invalid for a base set of size {n} (need 0 < k <= n)")


class InvalidRank(UnrankError):
    """Rank outside [0, C(n, k))."""

    def __init__(self, rank: int, total: int):
        self.rank = rank
        self.total = total
        super().__init__(f"rank {rank} is out of range (need 0 <= rank < {total})")


class TooManyRequested(UnrankError):
    """More samples requested than there are k-combinations."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"requested {requested} samples but only {available} combinations exist"
        )
