#!/usr/bin/env python3
"""Quick perf benchmark for formatting a directory of Python files."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from pyprettier.format import FormatOptions, run_format
from pyprettier.printer import UnsupportedNodeKind


def _collect_source_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.py")) if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    options: FormatOptions,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    formatted = 0
    unsupported = 0
    total_diagnostics = 0
    iterator = (
        tqdm(sources, desc=label, unit="file")
        if show_progress
        else sources
    )
    for text in iterator:
        try:
            result = run_format(text, options)
        except UnsupportedNodeKind:
            unsupported += 1
            continue
        formatted += 1
        total_diagnostics += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, formatted, unsupported, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark formatting throughput")
    parser.add_argument("root", type=Path, help="Directory to scan for .py files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--width", type=int, default=80, help="Print width (default: 80)")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick profiling/smoke tests (0 = all files)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_source_files(root)
    if not files:
        raise SystemExit(f"No .py files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    sources = [path.read_text(encoding="utf-8") for path in files]
    options = FormatOptions(print_width=args.width)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                options=options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        formatted_count = 0
        unsupported_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, formatted_count, unsupported_count, diagnostics_count = _run_once(
                sources,
                options=options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, formatted_count, unsupported_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, formatted_count, unsupported_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, formatted_count, unsupported_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Formatted: {formatted_count}")
    print(f"Unsupported: {unsupported_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
