"""Continuation types returned by Algorithm.step().

A continuation tells the engine what to do with the frame that just ran:

- Continue: the frame mutated its own state; run it again (tail call).
- Call: push a child frame and remember how to fold its result back.
- Result: the frame is finished; pop it and hand the value to its parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeAlias

# (parent_state, shared_context, child_result) -> None, mutating parent_state in place.
ResumeAction: TypeAlias = Callable[[Any, Any, Any], None]


@dataclass(frozen=True)
class Continue:
    """Run the same frame again without growing the stack."""


@dataclass(frozen=True)
class Call:
    """Push a frame for ``child``; ``resume`` folds its result into the caller.

    ``resume`` is stored on the calling frame and invoked exactly once, when
    the child's subtree produces its Result.
    """

    child: Any
    resume: ResumeAction


@dataclass(frozen=True)
class Result:
    """Finish the current frame with ``value``."""

    value: Any


Continuation = Continue | Call | Result

CONTINUE = Continue()


def is_continuation(obj: Any) -> bool:
    """Return True if ``obj`` is one of the three continuation cases."""
    return isinstance(obj, (Continue, Call, Result))


__all__ = [
    "CONTINUE",
    "Call",
    "Continuation",
    "Continue",
    "ResumeAction",
    "Result",
    "is_continuation",
]
