#!/usr/bin/env python3
"""Generate a Markdown benchmark report from JSON result files.

Usage:
    python benchmarks/_report_generator.py
    python benchmarks/_report_generator.py --tags py3.12,py3.13
"""

import argparse
import json
import platform
from datetime import datetime, timezone
from pathlib import Path

RESULTS_DIR = Path(__file__).resolve().parent / "results"
REPORT_PATH = Path(__file__).resolve().parent / "BENCHMARK_REPORT.md"


def _fmt_ops(ops: float) -> str:
    if ops >= 1_000_000:
        return f"{ops / 1_000_000:.2f}M"
    if ops >= 1_000:
        return f"{ops / 1_000:.0f}K"
    return f"{ops:.0f}"


def _load_results(tags: list[str] | None) -> dict[str, dict]:
    data: dict[str, dict] = {}
    if tags:
        for tag in tags:
            p = RESULTS_DIR / f"bench_{tag}.json"
            if p.exists():
                data[tag] = json.loads(p.read_text())
            else:
                print(f"Warning: {p} not found, skipping")
    else:
        for p in sorted(RESULTS_DIR.glob("bench_*.json")):
            tag = p.stem.removeprefix("bench_")
            data[tag] = json.loads(p.read_text())
    return data


def _md_table(headers: list[str], rows: list[list[str]]) -> str:
    lines = []
    lines.append("| " + " | ".join(headers) + " |")
    lines.append("| " + " | ".join("---" for _ in headers) + " |")
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def _run_heading(tag: str, run: dict) -> str:
    py = run["python"]
    ft = " (free-threaded)" if py["gil_disabled"] else ""
    return f"### {tag} — Python {py['version']}{ft}\n"


def _by_index_table(results: dict[str, dict[str, float]]) -> str:
    """Table with one row per index and one column per contestant."""
    all_names: list[str] = []
    for n_data in results.values():
        for name in n_data:
            if name not in all_names:
                all_names.append(name)

    headers = ["n"] + all_names
    rows = []
    for n_key in sorted(results, key=int):
        row = [n_key]
        for name in all_names:
            val = results[n_key].get(name)
            row.append(_fmt_ops(val) if val is not None else "-")
        rows.append(row)
    return _md_table(headers, rows)


def generate_report(data: dict[str, dict]) -> str:
    sections: list[str] = []

    # Header
    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    sections.append("# fibcache Benchmark Report\n")
    sections.append(f"Generated: {now}  ")
    sections.append(f"Machine: {platform.machine()} / {platform.system()} {platform.release()}  ")

    # Python versions
    versions = []
    for tag, run in data.items():
        py = run["python"]
        ft = " (free-threaded)" if py["gil_disabled"] else ""
        versions.append(f"**{tag}**: Python {py['version']}{ft}")
    sections.append("Python versions: " + ", ".join(versions) + "\n")

    # Contestants
    first_run = next(iter(data.values()))
    if "contestants" in first_run:
        sections.append("## Contestants\n")
        headers = ["Library", "Version", "Available", "Notes"]
        rows = []
        for name, info in first_run["contestants"].items():
            rows.append([
                name,
                info.get("version", ""),
                "Yes" if info.get("available") else "No",
                ", ".join(info.get("notes", [])) or "-",
            ])
        sections.append(_md_table(headers, rows))
        sections.append("")

    # ── Single-index throughput ──
    sections.append("## Single-Index Throughput (requests/s, fresh state per request)\n")
    for tag, run in data.items():
        sections.append(_run_heading(tag, run))
        sections.append(_by_index_table(run["point"]))
        sections.append("")

    # ── Range throughput ──
    sections.append("## Range Throughput (ranges/s, indices 0..n)\n")
    for tag, run in data.items():
        sections.append(_run_heading(tag, run))
        sections.append(_by_index_table(run["range"]))
        sections.append("")

    # ── Sustained throughput ──
    tags_with_sustained = [t for t, r in data.items() if "sustained" in r]
    if tags_with_sustained:
        sections.append("## Sustained Throughput (10s, requests/s)\n")
        all_names = []
        for tag in tags_with_sustained:
            for name in data[tag]["sustained"]:
                if name not in all_names:
                    all_names.append(name)

        headers = ["Version"] + all_names
        rows = []
        for tag in tags_with_sustained:
            row = [tag]
            for name in all_names:
                d = data[tag]["sustained"].get(name)
                row.append(_fmt_ops(d["ops_per_sec"]) if d else "-")
            rows.append(row)
        sections.append(_md_table(headers, rows))
        sections.append("")

    # ── Fresh vs reused cache ──
    tags_with_reuse = [t for t, r in data.items() if "reuse" in r]
    if tags_with_reuse:
        sections.append("## Fresh vs Reused FibonacciCache (fibcache only)\n")
        headers = ["Version", "Fresh (ops/s)", "Reused (ops/s)", "Reused hit rate", "Ratio"]
        rows = []
        for tag in tags_with_reuse:
            ru = data[tag]["reuse"]
            fresh = ru["fresh"]["ops_per_sec"]
            reused = ru["reused"]["ops_per_sec"]
            ratio = f"{reused / fresh:.1f}x" if fresh else "inf"
            rows.append([
                tag,
                _fmt_ops(fresh),
                _fmt_ops(reused),
                f"{ru['reused']['hit_rate']:.1%}",
                ratio,
            ])
        sections.append(_md_table(headers, rows))
        sections.append("")

    # ── Feature matrix ──
    sections.append("## Feature Comparison\n")
    features = [
        ("Evaluation order", "Bottom-up", "Bottom-up", "Top-down", "Top-down"),
        ("Recursion depth limit", "No", "No", "Yes", "Yes"),
        ("Range in one call", "Yes", "Yes", "No", "No"),
        ("Hit/miss statistics", "Yes", "No", "Yes", "No"),
        ("Implementation", "Pure Python", "Pure Python", "C (CPython)", "Pure Python"),
    ]
    headers = ["Feature", "fibcache", "fibcache_stream", "lru_cache", "cachetools"]
    rows = [list(f) for f in features]
    sections.append(_md_table(headers, rows))
    sections.append("")

    return "\n".join(sections)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate benchmark report")
    parser.add_argument(
        "--tags",
        type=str,
        default=None,
        help="Comma-separated list of tags to include (default: all bench_*.json files)",
    )
    args = parser.parse_args()

    tags = [t.strip() for t in args.tags.split(",")] if args.tags else None
    data = _load_results(tags)

    if not data:
        print("No benchmark results found.")
        return

    report = generate_report(data)
    REPORT_PATH.write_text(report)
    print(f"Report written to {REPORT_PATH}")
    print(f"  Datasets: {list(data.keys())}")


if __name__ == "__main__":
    main()
