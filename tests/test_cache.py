"""Tests for subgraphrank.combinatorics.cache."""
import pickle
import threading
import time

import pytest

from subgraphrank.combinatorics.binomial import coefficient
from subgraphrank.combinatorics.cache import CoefficientCache


def test_get_missing_returns_none():
    cache = CoefficientCache()
    assert cache.get(5, 2) is None
    assert len(cache) == 0


def test_put_then_get():
    cache = CoefficientCache()
    cache.put(5, 2, 10)
    assert cache.get(5, 2) == 10
    assert (5, 2) in cache
    assert (2, 5) not in cache


def test_put_is_idempotent_first_value_wins():
    cache = CoefficientCache()
    assert cache.put(6, 3, 20) == 20
    assert cache.put(6, 3, 999) == 20
    assert cache.get(6, 3) == 20
    assert len(cache) == 1


def test_coefficient_memoizes():
    cache = CoefficientCache()
    assert cache.coefficient(20, 5) == 15504
    assert cache.misses == 1
    assert cache.hits == 0
    assert cache.coefficient(20, 5) == 15504
    assert cache.hits == 1
    assert cache.get(20, 5) == 15504


def test_instances_are_isolated():
    a = CoefficientCache()
    b = CoefficientCache()
    a.coefficient(10, 3)
    assert (10, 3) in a
    assert (10, 3) not in b


def test_cache_not_picklable():
    with pytest.raises(TypeError):
        pickle.dumps(CoefficientCache())


# --- concurrency ---

def test_concurrent_readers_and_writers():
    cache = CoefficientCache()
    errors = []
    barrier = threading.Barrier(8)

    def work(offset):
        barrier.wait()
        for n in range(0, 40):
            for r in range(0, n + 1, 3):
                val = cache.coefficient(n, (r + offset) % (n + 1))
                if val != coefficient(n, (r + offset) % (n + 1)):
                    errors.append((n, r, offset))

    threads = [threading.Thread(target=work, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(cache) > 0
    assert cache.get(39, 0) == 1


# --- reader-writer lock ---

def _run(target, *args):
    t = threading.Thread(target=target, args=args, daemon=True)
    t.start()
    return t


def _wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        time.sleep(0.005)
    return True


def test_readers_hold_lock_together():
    cache = CoefficientCache()
    barrier = threading.Barrier(3, timeout=5)
    broken = []

    def reader():
        with cache._lock.read():
            try:
                barrier.wait()
            except threading.BrokenBarrierError:
                broken.append(True)

    threads = [_run(reader) for _ in range(3)]
    for t in threads:
        t.join(timeout=10)

    assert broken == []
    assert not any(t.is_alive() for t in threads)


def test_put_waits_for_active_reader():
    cache = CoefficientCache()
    inside = threading.Event()
    release = threading.Event()
    written = threading.Event()

    def reader():
        with cache._lock.read():
            inside.set()
            release.wait(timeout=10)

    def writer():
        cache.put(4, 2, 6)
        written.set()

    r = _run(reader)
    assert inside.wait(timeout=5)
    w = _run(writer)

    assert not written.wait(timeout=0.2)
    assert _wait_until(lambda: cache._lock._writers_waiting == 1)

    release.set()
    assert written.wait(timeout=5)
    r.join(timeout=5)
    w.join(timeout=5)
    assert cache.get(4, 2) == 6


def test_waiting_writer_blocks_new_readers():
    cache = CoefficientCache()
    inside = threading.Event()
    release = threading.Event()
    seen = []
    second_done = threading.Event()

    def first_reader():
        with cache._lock.read():
            inside.set()
            release.wait(timeout=10)

    def second_reader():
        seen.append(cache.get(7, 3))
        second_done.set()

    r1 = _run(first_reader)
    assert inside.wait(timeout=5)
    w = _run(cache.put, 7, 3, 35)
    assert _wait_until(lambda: cache._lock._writers_waiting == 1)

    r2 = _run(second_reader)
    assert not second_done.wait(timeout=0.2)

    release.set()
    assert second_done.wait(timeout=5)
    for t in (r1, w, r2):
        t.join(timeout=5)

    # the second reader only got in after the queued write landed
    assert seen == [35]
