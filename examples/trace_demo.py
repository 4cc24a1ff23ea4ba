"""unrecurse trace demo: what a run looks like step by step.

Run with: python examples/trace_demo.py

The runner has two kinds of diagnostics:
  1. Run log (stdlib logging) - one DEBUG record when a run starts and ends
  2. Step trace (opt-in)      - every continuation through a StepTracer

The demo solves a small Towers of Hanoi with both solvers and prints the
statistics of each run.
"""

import logging
import sys

from loguru import logger

from unrecurse import Runner, StepTracer
from unrecurse.samples import HanoiSolver, HanoiSteps


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    logger.remove()
    logger.add(sys.stderr, format="<dim>{extra[component]}</dim> {message}", level="DEBUG")

    print("=" * 70)
    print("HanoiSolver, 3 disks, traced")
    print("=" * 70)
    runner = Runner(HanoiSolver(), observers=[StepTracer(max_lines=40)])
    report = runner.run_with_report(3)
    print(f"piles: {report.output.piles}")
    print(f"stats: {report.stats}")

    print()
    print("=" * 70)
    print("HanoiSteps, 16 disks, stats only")
    print("=" * 70)
    report = HanoiSteps.as_algorithm().run_with_report(16)
    print(f"solved: {report.output.is_solved}")
    print(f"moves: {report.stats.continues}  max depth: {report.stats.max_stack_depth}")


if __name__ == "__main__":
    main()
