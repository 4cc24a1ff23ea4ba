"""In-run memo table for algorithms that keep one in their shared context.

The runner knows nothing about memoization. An algorithm that wants it puts
a MemoTable in its shared context, looks a state's fingerprint up before
doing any work and records fresh results before returning them. Entries
live for a single run; there is no eviction.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from frozendict import frozendict

from unrecurse.errors import MemoConflictError

_MISSING = object()


class MemoTable:
    """Mapping from hashable state fingerprints to computed outputs."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, key: Hashable) -> tuple[bool, Any]:
        """Return ``(True, value)`` on a hit and ``(False, None)`` on a miss."""
        value = self._entries.get(key, _MISSING)
        if value is _MISSING:
            self.misses += 1
            return False, None
        self.hits += 1
        return True, value

    def record(self, key: Hashable, value: Any) -> None:
        """Store ``value`` for ``key``.

        Recording the same value again is a no-op. A different value for an
        existing key means the algorithm is not a function of its state.
        """
        existing = self._entries.get(key, _MISSING)
        if existing is _MISSING:
            self._entries[key] = value
        elif existing != value:
            raise MemoConflictError(key, existing, value)

    def snapshot(self) -> frozendict[Hashable, Any]:
        """Immutable copy of the current entries."""
        return frozendict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoTable):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MemoTable(entries={len(self._entries)}, hits={self.hits}, misses={self.misses})"


__all__ = ["MemoTable"]
