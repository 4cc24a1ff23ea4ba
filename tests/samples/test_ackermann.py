"""Ackermann on the explicit stack versus the direct recursive definition."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest

from unrecurse import BaseObserver, Call, Runner
from unrecurse.samples.ackermann import (
    RESOLVE_ARGUMENT,
    Ackermann,
    AckermannState,
    ackermann,
)

# The naive recursion for A(3, m) costs roughly 4**m calls, and its depth is
# about A(3, m). Beyond m = 6 the reference is only evaluated through the
# closed form A(3, m) = 2**(m + 3) - 3, which is itself checked against the
# recursion below.
REFERENCE_GRID = [(n, m) for n in range(4) for m in range(14) if n < 3 or m <= 6]
LARGE_GRID = [(3, m) for m in range(7, 14)]


def ackermann_reference(n: int, m: int) -> int:
    if n == 0:
        return m + 1
    if m == 0:
        return ackermann_reference(n - 1, 1)
    return ackermann_reference(n - 1, ackermann_reference(n, m - 1))


def ackermann_closed_form_n3(m: int) -> int:
    return 2 ** (m + 3) - 3


@pytest.fixture
def python_recursion_headroom() -> Iterator[None]:
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, 5000))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


@pytest.mark.parametrize(("n", "m"), REFERENCE_GRID)
def test_matches_reference(n, m, python_recursion_headroom):
    assert ackermann(n, m) == ackermann_reference(n, m)


@pytest.mark.parametrize(("n", "m"), REFERENCE_GRID)
def test_memoized_matches_reference(n, m, python_recursion_headroom):
    assert ackermann(n, m, memoize=True) == ackermann_reference(n, m)


@pytest.mark.parametrize("m", range(7))
def test_closed_form_agrees_with_recursion(m, python_recursion_headroom):
    assert ackermann_closed_form_n3(m) == ackermann_reference(3, m)


@pytest.mark.slow
@pytest.mark.parametrize(("n", "m"), LARGE_GRID)
def test_large_arguments(n, m):
    report = Runner(Ackermann(memoize=True)).run_with_report((n, m))
    assert report.output == ackermann_closed_form_n3(m)
    # A(2, k) nests one pending argument per level down to the memoized part.
    assert report.stats.max_stack_depth > 2**m


@pytest.mark.slow
@pytest.mark.parametrize("m", range(7, 10))
def test_plain_engine_large_arguments(m):
    assert Runner(Ackermann()).run((3, m)) == ackermann_closed_form_n3(m)


def test_stack_depth_tracks_recursion_depth():
    report = Runner(Ackermann()).run_with_report((2, 3))
    assert report.output == 9
    # Each pending argument adds a frame; the deepest chain is bounded by the answer.
    assert 1 < report.stats.max_stack_depth <= ackermann_reference(2, 3) + 2


def test_pending_argument_is_called():
    inner = AckermannState(1, 0)
    state = AckermannState(2, inner)

    continuation = Ackermann().step(state, None)

    assert continuation == Call(inner, RESOLVE_ARGUMENT)


def test_resolve_argument_writes_value():
    state = AckermannState(2, AckermannState(1, 0))
    RESOLVE_ARGUMENT(state, None, 3)
    assert state.m == 3
    assert not state.pending


def test_tail_rewrite_nests_argument():
    state = AckermannState(2, 3)
    Ackermann().step(state, None)
    assert state == AckermannState(1, AckermannState(2, 2))


def test_memo_table_filled_during_run():
    captured = {}

    class CaptureContext(BaseObserver):
        def on_start(self, state, context):
            captured["memo"] = context

    assert Runner(Ackermann(memoize=True), observers=[CaptureContext()]).run((2, 2)) == 7

    snapshot = captured["memo"].snapshot()
    assert snapshot[(2, 2)] == 7
    assert all(value == ackermann_reference(*key) for key, value in snapshot.items())


def test_memo_is_fresh_per_run():
    algorithm = Ackermann(memoize=True)
    _, first = algorithm.initialize((2, 2))
    _, second = algorithm.initialize((2, 2))
    assert first is not second
    assert first == second


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        Ackermann().initialize((-1, 0))
