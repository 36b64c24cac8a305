from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Tuple

from .binomial import coefficient

CacheKey = Tuple[int, int]


class _ReadWriteLock:
    """
    Many concurrent readers, one exclusive writer.

    Waiting writers block new readers, so a steady stream of reads cannot
    starve a put().
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class CoefficientCache:
    """
    Memo table (n, r) -> C(n, r) for one unranking session.

    Append-only: entries are never evicted or replaced, the first value
    stored for a key wins. Safe to share between threads. Not picklable;
    worker processes build their own instance.
    """

    def __init__(self) -> None:
        self._table: Dict[CacheKey, int] = {}
        self._lock = _ReadWriteLock()
        self._stats_lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, n: int, r: int) -> Optional[int]:
        with self._lock.read():
            return self._table.get((n, r))

    def put(self, n: int, r: int, value: int) -> int:
        """Store C(n, r) unless already present; return the stored value."""
        with self._lock.write():
            return self._table.setdefault((n, r), value)

    def coefficient(self, n: int, r: int) -> int:
        """C(n, r), computed on a miss and remembered."""
        val = self.get(n, r)
        if val is not None:
            with self._stats_lock:
                self.hits += 1
            return val
        with self._stats_lock:
            self.misses += 1
        return self.put(n, r, coefficient(n, r))

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._table)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._table

    def __reduce__(self):
        raise TypeError(
            "CoefficientCache cannot be shared across processes; "
            "create one per worker instead"
        )
