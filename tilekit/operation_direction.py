"""Directions in which a window operation can be applied."""

from __future__ import annotations

from typing import Protocol

from tilekit.options import Axis, _WireEnum


class _Direction(Protocol):
    def index_in_direction(self, op_direction, idx: int, count: int) -> int | None:
        ...


class OperationDirection(_WireEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def opposite(self) -> OperationDirection:
        """The direction pointing the other way."""
        return _OPPOSITES[self]

    def flip(self, layout_flip: Axis | None) -> OperationDirection:
        """The direction as seen through a layout flipped along ``layout_flip``."""
        if layout_flip is None:
            return self
        horizontal = layout_flip in (Axis.HORIZONTAL, Axis.HORIZONTAL_AND_VERTICAL)
        vertical = layout_flip in (Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL)
        if self in (OperationDirection.LEFT, OperationDirection.RIGHT) and horizontal:
            return self.opposite()
        if self in (OperationDirection.UP, OperationDirection.DOWN) and vertical:
            return self.opposite()
        return self

    def destination(
        self,
        layout: _Direction,
        layout_flip: Axis | None,
        idx: int,
        length: int,
    ) -> int | None:
        """The index reached from ``idx`` in this direction, or None."""
        if length < 1:
            raise ValueError("length must be at least 1")
        return layout.index_in_direction(self.flip(layout_flip), idx, length)


_OPPOSITES = {
    OperationDirection.LEFT: OperationDirection.RIGHT,
    OperationDirection.RIGHT: OperationDirection.LEFT,
    OperationDirection.UP: OperationDirection.DOWN,
    OperationDirection.DOWN: OperationDirection.UP,
}