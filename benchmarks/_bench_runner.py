#!/usr/bin/env python3
"""Unified benchmark runner for fibcache vs memoized-recursion competitors.

Usage:
    python _bench_runner.py --tag py3.12
    python _bench_runner.py --tag py3.13 --quick
"""

import argparse
import functools
import json
import platform
import random
import sys
import sysconfig
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

RESULTS_DIR = Path(__file__).resolve().parent / "results"
RESULTS_DIR.mkdir(parents=True, exist_ok=True)

# Memoized recursion descends one frame per index
MAX_INDEX = 300


# ═══════════════════════════════════════════════════════════════════════════
# Contestant abstraction
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class Contestant:
    """A way of computing Fibonacci numbers with fresh state per request.

    ``make_point`` and ``make_range`` return a new callable each time, so
    every timed request starts from an empty memo just like ``fib``.
    """

    name: str
    make_point: Callable[[], Callable[[int], int]] | None = None
    make_range: Callable[[], Callable[[int], list[int]]] | None = None
    available: bool = False
    version: str = ""
    notes: list[str] = field(default_factory=list)


def _lru_fib():
    @functools.lru_cache(maxsize=None)
    def f(n: int) -> int:
        if n < 2:
            return n
        return f(n - 1) + f(n - 2)

    return f


def _range_from_point(make_point):
    def make():
        f = make_point()
        return lambda n: [f(i) for i in range(n + 1)]

    return make


def _build_contestants() -> list[Contestant]:
    contestants: list[Contestant] = []

    # 1. fibcache (always available — this is the project under test)
    from fibcache import FibonacciCache, FibonacciStream

    contestants.append(
        Contestant(
            name="fibcache",
            make_point=lambda: FibonacciCache().get,
            make_range=lambda: FibonacciCache().compute_range,
            available=True,
            version="0.1.0",
        )
    )
    contestants.append(
        Contestant(
            name="fibcache_stream",
            make_point=lambda: FibonacciStream().nth,
            make_range=lambda: lambda n: FibonacciStream().take(n + 1),
            available=True,
            version="0.1.0",
        )
    )

    # 2. functools.lru_cache (stdlib, always available)
    contestants.append(
        Contestant(
            name="lru_cache",
            make_point=_lru_fib,
            make_range=_range_from_point(_lru_fib),
            available=True,
            version=sys.version.split()[0],
            notes=["Top-down recursion"],
        )
    )

    # 3. cachetools
    try:
        import cachetools

        def _cachetools_fib():
            @cachetools.cached(cache={})
            def f(n: int) -> int:
                if n < 2:
                    return n
                return f(n - 1) + f(n - 2)

            return f

        contestants.append(
            Contestant(
                name="cachetools",
                make_point=_cachetools_fib,
                make_range=_range_from_point(_cachetools_fib),
                available=True,
                version=cachetools.__version__,
                notes=["Top-down recursion"],
            )
        )
    except ImportError:
        contestants.append(Contestant(name="cachetools"))

    return contestants


# ═══════════════════════════════════════════════════════════════════════════
# Environment info
# ═══════════════════════════════════════════════════════════════════════════


def python_info() -> dict:
    """Collect Python build/runtime details."""
    gil_disabled = getattr(sys.flags, "nogil", False) or sysconfig.get_config_var("Py_GIL_DISABLED")
    return {
        "version": sys.version.split()[0],
        "implementation": platform.python_implementation(),
        "build": platform.python_build()[0],
        "compiler": platform.python_compiler(),
        "arch": platform.machine(),
        "gil_disabled": bool(gil_disabled),
    }


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════


def random_indices(n: int, max_index: int = MAX_INDEX, *, seed: int = 42) -> list[int]:
    """Generate *n* uniformly distributed indices in ``0..max_index``."""
    rng = random.Random(seed)
    return [rng.randint(0, max_index) for _ in range(n)]


def fmt(ops: float) -> str:
    if ops >= 1_000_000:
        return f"{ops / 1_000_000:>7.2f}M"
    if ops >= 1_000:
        return f"{ops / 1_000:>7.0f}K"
    return f"{ops:>7.0f} "


def _time_requests(make, n: int, n_ops: int) -> float:
    """Time *n_ops* fresh-state requests for index *n*, return elapsed seconds."""
    t0 = time.perf_counter()
    for _ in range(n_ops):
        make()(n)
    return time.perf_counter() - t0


# ═══════════════════════════════════════════════════════════════════════════
# Benchmark 1 — Correctness verification
# ═══════════════════════════════════════════════════════════════════════════


def verify_correctness(contestants: list[Contestant], n_ops: int = 2_000) -> bool:
    from fibcache import fib, fib_range

    reference = _lru_fib()
    for k in random_indices(n_ops, seed=99):
        expected = reference(k)
        if fib(k) != expected:
            print(f"MISMATCH at n={k}: fibcache={fib(k)}, lru_cache={expected}")
            return False

    expected_range = [reference(i) for i in range(MAX_INDEX + 1)]
    if fib_range(MAX_INDEX) != expected_range:
        print("MISMATCH in fib_range")
        return False

    for c in contestants:
        if not c.available:
            continue
        if c.make_point()(MAX_INDEX) != expected_range[-1]:
            print(f"MISMATCH: {c.name} point lookup")
            return False
        if c.make_range()(MAX_INDEX) != expected_range:
            print(f"MISMATCH: {c.name} range")
            return False

    return True


# ═══════════════════════════════════════════════════════════════════════════
# Benchmark 2 — Single-index throughput vs index
# ═══════════════════════════════════════════════════════════════════════════


def bench_point(
    contestants: list[Contestant],
    indices: list[int],
    n_ops: int = 2_000,
) -> dict:
    results: dict[str, dict[str, float]] = {}
    active = [c for c in contestants if c.available]

    for n in indices:
        n_results: dict[str, float] = {}
        for c in active:
            elapsed = _time_requests(c.make_point, n, n_ops)
            n_results[c.name] = n_ops / elapsed
        results[str(n)] = n_results

    return results


# ═══════════════════════════════════════════════════════════════════════════
# Benchmark 3 — Range throughput vs range length
# ═══════════════════════════════════════════════════════════════════════════


def bench_range(
    contestants: list[Contestant],
    indices: list[int],
    n_ops: int = 2_000,
) -> dict:
    results: dict[str, dict[str, float]] = {}
    active = [c for c in contestants if c.available]

    for n in indices:
        n_results: dict[str, float] = {}
        for c in active:
            elapsed = _time_requests(c.make_range, n, n_ops)
            n_results[c.name] = n_ops / elapsed
        results[str(n)] = n_results

    return results


# ═══════════════════════════════════════════════════════════════════════════
# Benchmark 4 — Sustained throughput (~10s time-based)
# ═══════════════════════════════════════════════════════════════════════════


def bench_sustained(
    contestants: list[Contestant],
    duration: float = 10.0,
) -> dict[str, dict[str, float]]:
    keys = random_indices(100_000)
    n_keys = len(keys)
    results: dict[str, dict[str, float]] = {}

    active = [c for c in contestants if c.available]

    for c in active:
        make = c.make_point
        deadline = time.perf_counter() + duration
        ops = 0
        idx = 0
        t0 = time.perf_counter()
        while time.perf_counter() < deadline:
            make()(keys[idx])
            ops += 1
            idx += 1
            if idx >= n_keys:
                idx = 0
        elapsed = time.perf_counter() - t0
        results[c.name] = {"ops": ops, "elapsed": elapsed, "ops_per_sec": ops / elapsed}

    return results


# ═══════════════════════════════════════════════════════════════════════════
# Benchmark 5 — Fresh cache per request vs one reused cache
# ═══════════════════════════════════════════════════════════════════════════


def bench_reuse(n_ops: int = 50_000) -> dict[str, dict[str, float]]:
    from fibcache import FibonacciCache

    keys = random_indices(n_ops, max_index=2000)
    results: dict[str, dict[str, float]] = {}

    t0 = time.perf_counter()
    for k in keys:
        FibonacciCache().get(k)
    elapsed = time.perf_counter() - t0
    results["fresh"] = {"ops_per_sec": n_ops / elapsed, "hit_rate": 0.0}

    fc = FibonacciCache()
    t0 = time.perf_counter()
    for k in keys:
        fc.get(k)
    elapsed = time.perf_counter() - t0

    info = fc.cache_info()
    total = info.hits + info.misses
    hit_rate = info.hits / total if total else 0.0
    results["reused"] = {"ops_per_sec": n_ops / elapsed, "hit_rate": hit_rate}

    return results


# ═══════════════════════════════════════════════════════════════════════════
# Main
# ═══════════════════════════════════════════════════════════════════════════


def main() -> None:
    parser = argparse.ArgumentParser(description="fibcache benchmark runner")
    parser.add_argument("--tag", required=True, help="Label for this run (e.g. py3.12)")
    parser.add_argument("--quick", action="store_true", help="Skip sustained benchmark")
    args = parser.parse_args()

    info = python_info()
    contestants = _build_contestants()
    available = [c for c in contestants if c.available]
    unavailable = [c for c in contestants if not c.available]

    total_steps = 4 if args.quick else 5

    tag_suffix = " (free-threaded)" if info["gil_disabled"] else ""
    print(f"Python {info['version']}{tag_suffix}  [{info['implementation']}]")
    print(f"{info['compiler']}")
    print(f"{info['arch']}")
    if args.quick:
        print("(--quick mode: skipping sustained benchmark)")

    print(f"\nContestants ({len(available)} available):")
    for c in available:
        notes = f"  ({', '.join(c.notes)})" if c.notes else ""
        print(f"  {c.name} v{c.version}{notes}")
    if unavailable:
        print(f"  Skipped (not installed): {', '.join(c.name for c in unavailable)}")

    # 1. Correctness
    print(f"\n[1/{total_steps}] Correctness verification ...")
    ok = verify_correctness(contestants)
    print(f"  Result: {'PASS' if ok else 'FAIL'}")
    if not ok:
        sys.exit(1)

    indices = [10, 50, 100, 200, MAX_INDEX]

    # 2. Single-index throughput
    print(f"\n[2/{total_steps}] Single-index throughput vs n ...")
    point_results = bench_point(contestants, indices)
    for n in indices:
        parts = []
        for name, ops in point_results[str(n)].items():
            parts.append(f"{name}={fmt(ops)}")
        print(f"  n={n:>4}  {' '.join(parts)}")

    # 3. Range throughput
    print(f"\n[3/{total_steps}] Range throughput vs n ...")
    range_results = bench_range(contestants, indices)
    for n in indices:
        parts = []
        for name, ops in range_results[str(n)].items():
            parts.append(f"{name}={fmt(ops)}")
        print(f"  n={n:>4}  {' '.join(parts)}")

    # 4. Sustained throughput
    sustained_results = None
    if not args.quick:
        print(f"\n[4/{total_steps}] Sustained throughput (~10s per impl) ...")
        sustained_results = bench_sustained(contestants)
        for label, data in sustained_results.items():
            print(f"  {label}: {data['ops_per_sec']:,.0f} ops/s ({data['elapsed']:.2f}s)")

    # 5. Fresh vs reused cache
    step = 4 if args.quick else 5
    print(f"\n[{step}/{total_steps}] Fresh cache per request vs reused cache ...")
    reuse_results = bench_reuse()
    for mode, data in reuse_results.items():
        print(f"  {mode}: {data['ops_per_sec']:,.0f} ops/s  hit_rate={data['hit_rate']:.1%}")

    # Save JSON
    contestant_info = {
        c.name: {"version": c.version, "available": c.available, "notes": c.notes}
        for c in contestants
    }
    payload: dict = {
        "python": info,
        "contestants": contestant_info,
        "point": point_results,
        "range": range_results,
        "reuse": reuse_results,
    }
    if sustained_results is not None:
        payload["sustained"] = sustained_results

    json_path = RESULTS_DIR / f"bench_{args.tag}.json"
    json_path.write_text(json.dumps(payload, indent=2))
    print(f"\nResults saved to {json_path}")


if __name__ == "__main__":
    main()
