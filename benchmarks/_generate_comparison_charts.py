#!/usr/bin/env python3
"""Generate comparison charts (fibcache vs lru_cache vs cachetools).

Produces 3 PNGs in benchmarks/results/:
  - comparison_point.png   Single-index throughput vs n
  - comparison_range.png   Range throughput vs n
  - comparison_reuse.png   Fresh cache per request vs one reused cache

Usage:
    uv run python benchmarks/_generate_comparison_charts.py --tag py3.12
"""

import argparse
import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402, I001

RESULTS_DIR = Path(__file__).resolve().parent / "results"

LIBS = ["fibcache", "fibcache_stream", "lru_cache", "cachetools"]
COLORS = {
    "fibcache": "#2563eb",
    "fibcache_stream": "#60a5fa",
    "lru_cache": "#ea580c",
    "cachetools": "#16a34a",
}

DPI = 150


def _load(filename: str) -> dict:
    return json.loads((RESULTS_DIR / filename).read_text())


def _thousands(val: float) -> float:
    return val / 1_000


def _py_label(data: dict) -> str:
    py = data["python"]
    ver = py["version"]
    suffix = "t (no GIL)" if py["gil_disabled"] else ""
    return f"Python {ver}{suffix}"


def _chart_by_index(data: dict, key: str, title: str, ylabel: str, filename: str) -> None:
    results = data[key]
    indices = sorted(int(k) for k in results)

    fig, ax = plt.subplots(figsize=(8, 5))
    for lib in LIBS:
        values = [_thousands(results[str(n)].get(lib, 0)) for n in indices]
        if any(v > 0 for v in values):
            ax.plot(indices, values, marker="o", label=lib, color=COLORS[lib], linewidth=2)

    ax.set_xlabel("n")
    ax.set_ylabel(ylabel)
    ax.set_title(f"{title} ({_py_label(data)})")
    ax.set_yscale("log")
    ax.legend()
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(RESULTS_DIR / filename, dpi=DPI)
    plt.close(fig)
    print(f"  {filename}")


def chart_point(data: dict) -> None:
    """Chart 1: Line — single-index throughput, fresh state per request."""
    _chart_by_index(
        data, "point", "Single-Index Throughput", "Throughput (K requests/s)", "comparison_point.png"
    )


def chart_range(data: dict) -> None:
    """Chart 2: Line — throughput of computing indices 0..n."""
    _chart_by_index(data, "range", "Range Throughput", "Throughput (K ranges/s)", "comparison_range.png")


def chart_reuse(data: dict) -> None:
    """Chart 3: Bar (log y) — fresh cache per request vs one reused cache."""
    reuse = data["reuse"]
    categories = ["Fresh\n(per request)", "Reused\n(one cache)"]
    values = [
        _thousands(reuse["fresh"]["ops_per_sec"]),
        _thousands(reuse["reused"]["ops_per_sec"]),
    ]

    fig, ax = plt.subplots(figsize=(7, 5))
    bars = ax.bar(categories, values, color=[COLORS["fibcache"], "#93c5fd"])

    for bar, val in zip(bars, values, strict=True):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height(),
            f"{val:.1f}K",
            ha="center",
            va="bottom",
            fontsize=10,
            fontweight="bold",
        )

    ax.set_ylabel("Throughput (K ops/s)")
    ax.set_title(f"FibonacciCache Reuse ({_py_label(data)})")
    ax.set_yscale("log")
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(RESULTS_DIR / "comparison_reuse.png", dpi=DPI)
    plt.close(fig)
    print("  comparison_reuse.png")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate comparison charts")
    parser.add_argument("--tag", default="default", help="Result tag to chart (bench_<tag>.json)")
    args = parser.parse_args()

    print("Loading benchmark data...")
    data = _load(f"bench_{args.tag}.json")
    print(f"  {args.tag}: {_py_label(data)}")

    print("\nGenerating charts...")
    chart_point(data)
    chart_range(data)
    chart_reuse(data)
    print("\nDone!")


if __name__ == "__main__":
    main()
