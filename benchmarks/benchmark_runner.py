"""Micro-benchmarks for the unrecurse runner.

Usage
-----
    python benchmarks/benchmark_runner.py --runs 50 --size 12

Compares a plain recursive Towers of Hanoi against the stage-machine solver
and the StepSequence solver running on the explicit stack.
"""

from __future__ import annotations

import argparse
import statistics
import sys
import time
from typing import Callable, Iterable

from unrecurse import Runner
from unrecurse.samples.hanoi import HanoiBoard, HanoiSolver, HanoiSteps, Peg


def _move_all(board: HanoiBoard, amount: int, source: Peg, target: Peg, via: Peg) -> None:
    if amount <= 0:
        return
    _move_all(board, amount - 1, source, via, target)
    board.move(source, target)
    _move_all(board, amount - 1, via, target, source)


def _recursive(size: int) -> HanoiBoard:
    board = HanoiBoard.new(size)
    _move_all(board, size, Peg.FIRST, Peg.THIRD, Peg.SECOND)
    return board


def _solvers() -> dict[str, Callable[[int], HanoiBoard]]:
    return {
        "recursive": _recursive,
        "HanoiSolver": Runner(HanoiSolver()).run,
        "HanoiSteps": Runner(HanoiSteps.as_algorithm()).run,
    }


def benchmark(
    solve: Callable[[int], HanoiBoard],
    runs: int,
    *,
    size: int,
    label: str = "solver",
) -> dict[str, float]:
    """Time ``runs`` complete solves of a board with ``size`` disks."""
    timings: list[float] = []

    for _ in range(runs):
        start = time.perf_counter()
        board = solve(size)
        elapsed = (time.perf_counter() - start) * 1000.0
        if not board.is_solved:
            raise RuntimeError(f"{label} left the board unsolved: {board.piles}")
        timings.append(elapsed)

    return {
        "label": label,
        "runs": runs,
        "size": size,
        "min_ms": min(timings),
        "max_ms": max(timings),
        "mean_ms": statistics.mean(timings),
        "median_ms": statistics.median(timings),
    }


def overhead_percent(baseline: dict[str, float], candidate: dict[str, float]) -> float:
    """Median slowdown of ``candidate`` relative to ``baseline`` (positive = slower)."""
    return ((candidate["median_ms"] - baseline["median_ms"]) / baseline["median_ms"]) * 100


def format_report(results: Iterable[tuple[str, dict[str, float]]]) -> str:
    lines = ["unrecurse benchmark results:"]
    for label, stats in results:
        lines.append(f"  {label}:")
        lines.append(
            "    runs={runs} size={size} | min={min_ms:.2f}ms "
            "median={median_ms:.2f}ms mean={mean_ms:.2f}ms max={max_ms:.2f}ms".format(**stats)
        )
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the unrecurse runner")
    parser.add_argument("--runs", type=int, default=20, help="Number of solves per solver")
    parser.add_argument("--size", type=int, default=12, help="Number of disks")
    parser.add_argument(
        "--overhead-threshold",
        type=float,
        default=None,
        help="Fail if a runner-based solver exceeds this slowdown percentage",
    )
    args = parser.parse_args()

    results = [
        (label, benchmark(solve, args.runs, size=args.size, label=label))
        for label, solve in _solvers().items()
    ]
    print(format_report(results))
    print()

    baseline = results[0][1]
    worst = 0.0
    for label, stats in results[1:]:
        overhead = overhead_percent(baseline, stats)
        worst = max(worst, overhead)
        print(f"  {label}: {overhead:+.2f}% versus recursion")

    if args.overhead_threshold is not None and worst > args.overhead_threshold:
        print(f"\n  WARNING: overhead exceeds threshold of {args.overhead_threshold}%!")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - CLI script
    main()
