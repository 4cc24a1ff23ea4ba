"""Properties every algorithm run on the engine must have."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

import pytest

from unrecurse import Algorithm, Call, Continuation, ResumeAction, Runner
from unrecurse.samples import (
    Ackermann,
    FibonacciSequence,
    HanoiSolver,
    HanoiSteps,
    MemoFibonacci,
    Parity,
    check_even,
)

CASES = [
    pytest.param(Parity(), check_even(501), id="parity"),
    pytest.param(HanoiSolver(), 7, id="hanoi"),
    pytest.param(HanoiSteps.as_algorithm(), 7, id="hanoi-steps"),
    pytest.param(Ackermann(), (2, 4), id="ackermann"),
    pytest.param(Ackermann(memoize=True), (3, 3), id="ackermann-memo"),
    pytest.param(FibonacciSequence.as_algorithm(), 25, id="fibonacci-sequence"),
    pytest.param(MemoFibonacci(), 25, id="fibonacci-memo"),
]


@dataclass
class CountingResume:
    """Wraps a resume action and counts its invocations in a shared Counter."""

    inner: ResumeAction
    counts: Counter
    key: int

    def __call__(self, state: Any, context: Any, value: Any) -> None:
        self.counts[self.key] += 1
        self.inner(state, context, value)


@dataclass
class CountingResumes(Algorithm[Any, Any, Any, Any]):
    """Delegates to ``inner`` and instruments every Call it issues."""

    inner: Algorithm[Any, Any, Any, Any]
    counts: Counter = field(default_factory=Counter)
    issued: int = 0

    def initialize(self, input: Any) -> tuple[Any, Any]:
        return self.inner.initialize(input)

    def step(self, state: Any, context: Any) -> Continuation:
        continuation = self.inner.step(state, context)
        if isinstance(continuation, Call):
            key = self.issued
            self.issued += 1
            return Call(continuation.child, CountingResume(continuation.resume, self.counts, key))
        return continuation


@pytest.mark.parametrize(("algorithm", "input"), CASES)
def test_runs_are_deterministic(algorithm, input):
    assert Runner(algorithm).run(input) == Runner(algorithm).run(input)


@pytest.mark.parametrize(("algorithm", "input"), CASES)
def test_initialize_is_repeatable(algorithm, input):
    assert algorithm.initialize(input) == algorithm.initialize(input)


@pytest.mark.parametrize(("algorithm", "input"), CASES)
def test_every_resume_runs_exactly_once(algorithm, input):
    counting = CountingResumes(algorithm)

    report = Runner(counting).run_with_report(input)

    assert report.output == Runner(algorithm).run(input)
    assert counting.issued == report.stats.calls
    assert sorted(counting.counts) == list(range(counting.issued))
    assert set(counting.counts.values()) <= {1}


@pytest.mark.parametrize(("algorithm", "input"), CASES)
def test_stats_are_consistent(algorithm, input):
    stats = Runner(algorithm).run_with_report(input).stats
    # Every frame pushed by a Call is popped by exactly one Result, plus the root.
    assert stats.results == stats.calls + 1
    assert stats.total_steps == stats.continues + stats.calls + stats.results
    assert 1 <= stats.max_stack_depth <= stats.calls + 1


def test_tail_loop_stack_stays_bounded():
    for value in (10, 10_000, 200_000):
        assert Runner(Parity()).run_with_report(check_even(value)).stats.max_stack_depth == 1


def test_deep_recursion_outgrows_python_stack(recursive_sum):
    depth = sys.getrecursionlimit() * 4
    report = Runner(recursive_sum, capacity_hint=8).run_with_report(depth)
    assert report.output == depth * (depth + 1) // 2
    assert report.stats.max_stack_depth == depth + 1
