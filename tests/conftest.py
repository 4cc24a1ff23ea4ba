"""
Pytest configuration for the unrecurse test suite.

Provides small helper algorithms shared by several test modules and
fixtures for observing runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import pytest
from loguru import logger

from unrecurse import CONTINUE, Algorithm, Call, Continuation, Result, StackDepthProbe


@dataclass
class SumState:
    n: int
    total: int | None = None


@dataclass(frozen=True)
class AddChildResult:
    def __call__(self, state: SumState, context: Any, value: int) -> None:
        state.total = state.n + value


class RecursiveSum(Algorithm[int, SumState, None, int]):
    """sum(n) = n + sum(n - 1): a non-tail recursion of depth n + 1."""

    def initialize(self, input: int) -> tuple[SumState, None]:
        return SumState(input), None

    def step(self, state: SumState, context: None) -> Continuation:
        if state.total is not None:
            return Result(state.total)
        if state.n == 0:
            return Result(0)
        return Call(SumState(state.n - 1), AddChildResult())


class Countdown(Algorithm[int, list, None, str]):
    """Tail loop that never grows the stack."""

    def initialize(self, input: int) -> tuple[list, None]:
        return [input], None

    def step(self, state: list, context: None) -> Continuation:
        if state[0] == 0:
            return Result("liftoff")
        state[0] -= 1
        return CONTINUE


@pytest.fixture
def recursive_sum() -> RecursiveSum:
    return RecursiveSum()


@pytest.fixture
def countdown() -> Countdown:
    return Countdown()


@pytest.fixture
def probe() -> StackDepthProbe:
    """Fresh StackDepthProbe for observing a single run."""
    return StackDepthProbe()


@pytest.fixture
def loguru_records() -> Iterator[list[str]]:
    """Capture loguru messages emitted while the test runs."""
    records: list[str] = []
    handler_id = logger.add(lambda message: records.append(message.record["message"]), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(handler_id)
