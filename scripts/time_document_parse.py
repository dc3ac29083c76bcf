#!/usr/bin/env python3
"""Quick perf benchmark for directory document parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from netdocpy.parser import ParseMode, parse_result


def _collect_documents(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    return sorted(path for path in root.rglob("*") if path.is_file())


def _run_once(
    files: list[Path],
    *,
    mode: ParseMode,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_items = 0
    total_failures = 0
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        result = parse_result(path.read_text(encoding="utf-8"), mode=mode)
        if result.error() is not None:
            total_failures += 1
            continue
        total_items += len(result.document())
    duration = time.perf_counter() - start
    return duration, len(files), total_items, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark directory document parsing throughput")
    parser.add_argument("root", type=Path, help="Document file or directory of documents")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode (default: strict)",
    )
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
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_documents(root)
    if not files:
        raise SystemExit(f"No files found under {root}")

    mode = ParseMode(args.mode)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                mode=mode,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        files_count = 0
        items_count = 0
        failures_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, items_count, failures_count = _run_once(
                files,
                mode=mode,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, items_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, items_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, items_count, failures_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {files_count} ({failures_count} rejected)")
    print(f"Items: {items_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    print(f"Items/s (mean): {items_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
