"""Recursion far past Python's recursion limit.

Run with: python examples/deep_recursion.py

A(3, 12) nests tens of thousands of pending arguments; parity of a large
number is a tail loop that never grows past a single frame.
"""

import sys

from unrecurse import Runner
from unrecurse.samples import Ackermann, Parity, check_odd


def main() -> None:
    print(f"Python recursion limit: {sys.getrecursionlimit()}")

    report = Runner(Ackermann(memoize=True), capacity_hint=1 << 16).run_with_report((3, 12))
    print(f"A(3, 12) = {report.output}")
    print(f"  max stack depth: {report.stats.max_stack_depth}")
    print(f"  steps: {report.stats.total_steps}")

    report = Runner(Parity()).run_with_report(check_odd(1_000_001))
    print(f"is_odd(1_000_001) = {report.output}")
    print(f"  max stack depth: {report.stats.max_stack_depth}")


if __name__ == "__main__":
    main()
