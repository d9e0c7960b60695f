"""Cycling forwards and backwards through a ring of indices."""

from __future__ import annotations

from tilekit.options import _WireEnum


class CycleDirection(_WireEnum):
    PREVIOUS = "previous"
    NEXT = "next"

    def next_idx(self, idx: int, length: int) -> int:
        """The index after ``idx`` in this direction, wrapping within ``length``."""
        if length < 1:
            raise ValueError("length must be at least 1")
        if self is CycleDirection.PREVIOUS:
            return length - 1 if idx == 0 else idx - 1
        return 0 if idx == length - 1 else idx + 1