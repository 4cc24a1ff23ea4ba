"""Explicit call stack used by the runner.

The stack is the only structure that grows with recursion depth. It is
backed by a pre-sized slot list and a top pointer so deep algorithms can
reserve room up front instead of growing one append at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from unrecurse.continuation import ResumeAction
from unrecurse.errors import EmptyStackError, InvalidCapacityError

DEFAULT_CAPACITY_HINT = 1024


def validate_capacity_hint(capacity_hint: int) -> int:
    """Return ``capacity_hint`` if it is a positive int, else raise InvalidCapacityError."""
    if not isinstance(capacity_hint, int) or isinstance(capacity_hint, bool) or capacity_hint < 1:
        raise InvalidCapacityError(f"capacity_hint must be a positive int, got {capacity_hint!r}")
    return capacity_hint


@dataclass
class Frame:
    """One activation of an algorithm.

    ``resume`` is set when this frame issues a Call and cleared when the
    child's result has been folded back in. A frame with ``resume is None``
    is either the bottom frame or has not called anything yet.
    """

    state: Any
    resume: ResumeAction | None = None


class FrameStack:
    """LIFO stack of frames, top = most recently pushed."""

    __slots__ = ("_slots", "_size", "_high_water")

    def __init__(self, capacity_hint: int = DEFAULT_CAPACITY_HINT) -> None:
        self._slots: list[Frame | None] = [None] * validate_capacity_hint(capacity_hint)
        self._size = 0
        self._high_water = 0

    def push(self, frame: Frame) -> None:
        if self._size == len(self._slots):
            self._slots.extend([None] * len(self._slots))
        self._slots[self._size] = frame
        self._size += 1
        if self._size > self._high_water:
            self._high_water = self._size

    def pop(self) -> Frame:
        if self._size == 0:
            raise EmptyStackError("pop from empty frame stack")
        self._size -= 1
        frame = self._slots[self._size]
        # Release the finished frame.
        self._slots[self._size] = None
        assert frame is not None
        return frame

    @property
    def top(self) -> Frame:
        if self._size == 0:
            raise EmptyStackError("empty frame stack has no top")
        frame = self._slots[self._size - 1]
        assert frame is not None
        return frame

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return len(self._slots)

    @property
    def high_water(self) -> int:
        """Deepest the stack has been since it was created."""
        return self._high_water

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Frame]:
        """Iterate frames bottom to top."""
        for index in range(self._size):
            frame = self._slots[index]
            assert frame is not None
            yield frame

    def __repr__(self) -> str:
        return f"FrameStack(depth={self._size}, capacity={len(self._slots)})"


__all__ = [
    "DEFAULT_CAPACITY_HINT",
    "Frame",
    "FrameStack",
    "validate_capacity_hint",
]
