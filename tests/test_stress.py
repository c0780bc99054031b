"""Stress tests that push the cache harder than the basic suite."""

import random

from fibcache import FibonacciCache, FibonacciStream, fib_range

# ---------------------------------------------------------------------------
# 1. Random access — 10k lookups into one cache, verify against a range
# ---------------------------------------------------------------------------


def test_random_access():
    expected = fib_range(2000)
    fc = FibonacciCache()
    rng = random.Random(42)

    for _ in range(10_000):
        i = rng.randint(0, 2000)
        assert fc.get(i) == expected[i]

    info = fc.cache_info()
    assert info.hits + info.misses == 10_000
    assert info.current_size <= 2001


# ---------------------------------------------------------------------------
# 2. Ascending requests — each new index is a single miss
# ---------------------------------------------------------------------------


def test_ascending_requests():
    fc = FibonacciCache()
    for i in range(2, 5000):
        fc.get(i)

    info = fc.cache_info()
    assert info.misses == 4998
    assert info.hits == 0
    assert info.current_size == 5000


# ---------------------------------------------------------------------------
# 3. Large range — cache and stream agree on big integers
# ---------------------------------------------------------------------------


def test_large_range_matches_stream():
    n = 20_000
    values = FibonacciCache().compute_range(n)
    assert values == FibonacciStream().take(n + 1)
    assert values[-1] == values[-2] + values[-3]
