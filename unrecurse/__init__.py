"""
unrecurse - run recursive algorithms on an explicit stack.

Algorithms are written as state machines that return a continuation after
each step. The runner keeps the frames on a heap-allocated stack, so
recursion depth is limited by memory instead of Python's recursion limit.

Example:
    >>> from unrecurse import Algorithm, Call, Result, CONTINUE
    >>> class Parity(Algorithm):
    ...     def initialize(self, n):
    ...         return [n, True], None
    ...
    ...     def step(self, state, context):
    ...         if state[0] == 0:
    ...             return Result(state[1])
    ...         state[0] -= 1
    ...         state[1] = not state[1]
    ...         return CONTINUE
    >>> Parity().run(100_000)
    True
"""

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import (
    CONTINUE,
    Call,
    Continuation,
    Continue,
    ResumeAction,
    Result,
    is_continuation,
)
from unrecurse.errors import (
    ContractViolationError,
    EmptyStackError,
    InvalidCapacityError,
    InvalidContinuationError,
    MemoConflictError,
    MissingResumeActionError,
)
from unrecurse.frames import DEFAULT_CAPACITY_HINT, Frame, FrameStack
from unrecurse.memo import MemoTable
from unrecurse.observability import (
    BaseObserver,
    RunObserver,
    RunStats,
    StackDepthProbe,
    StepTracer,
)
from unrecurse.runner import RunReport, Runner, run
from unrecurse.stepping import (
    AdvanceCursor,
    Mutate,
    PushCall,
    StepSequence,
    Stepper,
    StepperState,
    SteppingContinuation,
)

__version__ = "0.1.0"

__all__ = [
    # Continuations
    "CONTINUE",
    "Call",
    "Continuation",
    "Continue",
    "ResumeAction",
    "Result",
    "is_continuation",
    # Contract and engine
    "Algorithm",
    "DEFAULT_CAPACITY_HINT",
    "Frame",
    "FrameStack",
    "RunReport",
    "Runner",
    "run",
    # Step sequences
    "AdvanceCursor",
    "Mutate",
    "PushCall",
    "StepSequence",
    "Stepper",
    "StepperState",
    "SteppingContinuation",
    # Memoization
    "MemoTable",
    # Observability
    "BaseObserver",
    "RunObserver",
    "RunStats",
    "StackDepthProbe",
    "StepTracer",
    # Errors
    "ContractViolationError",
    "EmptyStackError",
    "InvalidCapacityError",
    "InvalidContinuationError",
    "MemoConflictError",
    "MissingResumeActionError",
]
