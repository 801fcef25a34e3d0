#!/usr/bin/env python3
"""Quick perf benchmark for skeleton parsing over a Delphi project tree."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from delphipy.ast import DELPHI_SOURCE_EXTENSIONS
from delphipy.parser import ParserOptions
from delphipy.pipeline import parse_file


def _collect_source_files(root: Path) -> list[Path]:
    files = sorted(path for path in root.rglob("*") if path.suffix.lower() in DELPHI_SOURCE_EXTENSIONS)
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    options: ParserOptions,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    parsed_count = 0
    failed_count = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        result = parse_file(path, options)
        if result.file is not None:
            parsed_count += 1
        else:
            failed_count += 1
    duration = time.perf_counter() - start
    return duration, parsed_count, failed_count


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Delphi skeleton parsing throughput")
    parser.add_argument("root", type=Path, help="Directory containing .dpr/.pas/.dpk files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--fallback-encoding",
        default=None,
        help="Code page used for files that are not UTF-8 and have no BOM (e.g. cp1252)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick smoke tests (0 = all files)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_source_files(root)
    if not files:
        raise SystemExit(f"No Delphi source files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    options = ParserOptions(fallback_encoding=args.fallback_encoding)
    show_progress = not args.no_progress

    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(
            files,
            options=options,
            label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
            show_progress=show_progress,
        )

    timings: list[float] = []
    parsed_count = 0
    failed_count = 0
    for run_idx in range(max(args.runs, 1)):
        duration, parsed_count, failed_count = _run_once(
            files,
            options=options,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"files={len(files)} parsed={parsed_count} failed={failed_count}")
    print(f"mean={mean:.4f}s min={min(timings):.4f}s max={max(timings):.4f}s")
    if len(timings) > 1:
        print(f"stdev={statistics.stdev(timings):.4f}s")
    print(f"throughput={len(files) / mean:.1f} files/s" if mean > 0 else "throughput=inf")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
