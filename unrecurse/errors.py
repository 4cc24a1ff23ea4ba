"""Engine error types.

Every exception here signals a programming error: either an algorithm broke
the step/resume contract or the engine itself is inconsistent. None of them
is meant to be caught and recovered from inside a run.
"""

from __future__ import annotations

from typing import Any


class ContractViolationError(Exception):
    """Base class for violations of the algorithm/engine contract."""


class MissingResumeActionError(ContractViolationError):
    """Raised when a child's result reaches a frame with no pending resume action.

    This means a frame was pushed without its parent registering a resume
    action, or a resume action was consumed twice.

    Attributes:
        depth: Stack depth of the frame that should have received the result.
        state: State of that frame at the time of the violation.
        value: The result that could not be delivered.
    """

    def __init__(self, depth: int, state: Any, value: Any) -> None:
        self.depth = depth
        self.state = state
        self.value = value
        super().__init__(
            f"Frame at depth {depth} has no pending resume action for result {value!r}; "
            f"state={state!r}"
        )


class InvalidContinuationError(ContractViolationError, TypeError):
    """Raised when step() returns something other than Continue, Call or Result."""

    def __init__(self, returned: Any, message: str | None = None) -> None:
        self.returned = returned
        super().__init__(
            message
            or (
                f"step() returned {type(returned).__name__} {returned!r}; "
                "expected Continue, Call or Result"
            )
        )


class EmptyStackError(ContractViolationError, IndexError):
    """Raised when the engine pops or reads an empty frame stack."""


class MemoConflictError(ContractViolationError):
    """Raised when a memo key is recorded twice with different values."""

    def __init__(self, key: Any, existing: Any, value: Any) -> None:
        self.key = key
        self.existing = existing
        self.value = value
        super().__init__(
            f"Memo key {key!r} already holds {existing!r}, refusing to overwrite with {value!r}"
        )


class InvalidCapacityError(ValueError):
    """Raised when a stack capacity hint is not a positive integer."""


__all__ = [
    "ContractViolationError",
    "EmptyStackError",
    "InvalidCapacityError",
    "InvalidContinuationError",
    "MemoConflictError",
    "MissingResumeActionError",
]
