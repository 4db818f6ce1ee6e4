"""Scanner throughput benchmark over a directory of script files.

Usage::

    python -m rsjj.bench --root path/to/scripts --runs 5
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from rsjj.pipeline import scan_file

DEFAULT_GLOB = "*.rsjj"


@dataclass(frozen=True, slots=True)
class RunStats:
    """Totals and wall time of one pass over the dataset."""

    seconds: float
    files: int
    tokens: int
    diagnostics: int


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rsjj-bench", description="Measure how fast rsjj scans a tree of files")
    parser.add_argument("--root", type=Path, required=True, help="Directory searched for script files")
    parser.add_argument(
        "--glob",
        default=DEFAULT_GLOB,
        help=f"Recursive file name pattern (default: {DEFAULT_GLOB})",
    )
    parser.add_argument("--runs", type=int, default=5, help="Timed passes (at least one is made)")
    parser.add_argument("--warmups", type=int, default=1, help="Untimed passes made first")
    parser.add_argument("--no-progress", action="store_true", help="Hide the per-pass progress bar")
    parser.add_argument("--limit-files", type=int, default=0, help="Scan only the first N files (0 scans all)")
    return parser


def find_scripts(root: Path, pattern: str, *, limit: int = 0) -> list[Path]:
    if not root.is_dir():
        raise SystemExit(f"Invalid --root: {root}")
    scripts = sorted(path for path in root.rglob(pattern) if path.is_file())
    if not scripts:
        raise SystemExit(f"No {pattern} files found under {root}")
    return scripts[:limit] if limit > 0 else scripts


def scan_pass(files: Sequence[Path], *, label: str | None = None) -> RunStats:
    """Scan every file once; a progress bar is shown when `label` is given."""
    paths: Iterable[Path] = files if label is None else tqdm(files, desc=label, unit="file")
    tokens = diagnostics = 0
    started = time.perf_counter()
    for path in paths:
        result = scan_file(path)
        tokens += len(result.tokens)
        diagnostics += len(result.diagnostics)
    return RunStats(time.perf_counter() - started, len(files), tokens, diagnostics)


def summarize(root: Path, runs: Sequence[RunStats], *, warmups: int) -> list[str]:
    """Report lines for a non-empty list of timed passes."""
    seconds = [run.seconds for run in runs]
    mean = statistics.mean(seconds)
    last = runs[-1]
    lines = [
        f"Dataset: {root}",
        f"Files: {last.files}",
        f"Tokens: {last.tokens}",
        f"Diagnostics: {last.diagnostics}",
        f"Runs: {len(runs)} (warmups={warmups})",
        f"Best:   {min(seconds):.4f}s",
        f"Median: {statistics.median(seconds):.4f}s",
        f"Mean:   {mean:.4f}s",
        f"Worst:  {max(seconds):.4f}s",
    ]
    # coarse clocks can time a tiny dataset at zero
    if mean > 0:
        lines.append(f"Files/s (mean):  {last.files / mean:.1f}")
        lines.append(f"Tokens/s (mean): {last.tokens / mean:.1f}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    files = find_scripts(args.root, args.glob, limit=args.limit_files)
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def label(kind: str, index: int, total: int) -> str | None:
        return None if args.no_progress else f"{kind} {index}/{total}"

    for index in range(1, warmups + 1):
        scan_pass(files, label=label("warmup", index, warmups))
    timed = [scan_pass(files, label=label("run", index, runs)) for index in range(1, runs + 1)]

    for line in summarize(args.root, timed, warmups=warmups):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
