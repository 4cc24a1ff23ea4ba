"""Example algorithms written against the unrecurse contract."""

from unrecurse.samples.ackermann import Ackermann, AckermannState, ackermann
from unrecurse.samples.fibonacci import FibonacciSequence, MemoFibonacci, fibonacci_sequence
from unrecurse.samples.hanoi import (
    HanoiBoard,
    HanoiSolver,
    HanoiSteps,
    Peg,
    solve_hanoi,
    solve_hanoi_steps,
)
from unrecurse.samples.parity import Parity, ParityKind, ParityQuery, check_even, check_odd

__all__ = [
    "Ackermann",
    "AckermannState",
    "FibonacciSequence",
    "HanoiBoard",
    "HanoiSolver",
    "HanoiSteps",
    "MemoFibonacci",
    "Parity",
    "ParityKind",
    "ParityQuery",
    "Peg",
    "ackermann",
    "check_even",
    "check_odd",
    "fibonacci_sequence",
    "solve_hanoi",
    "solve_hanoi_steps",
]
