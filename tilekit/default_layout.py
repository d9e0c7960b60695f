"""The built-in tiling layouts: arrangement, resizing and directional navigation."""

from __future__ import annotations

from collections.abc import Sequence

from tilekit.arrangement import (
    _div,
    calculate_resize_adjustments,
    columns,
    recursive_fibonacci,
    rows,
)
from tilekit.operation_direction import OperationDirection
from tilekit.options import Axis, Sizing, _WireEnum
from tilekit.rect import Rect

_MAX_DIVISOR = 1.005

_HORIZONTAL_FLIPS = (Axis.HORIZONTAL, Axis.HORIZONTAL_AND_VERTICAL)
_VERTICAL_FLIPS = (Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL)


def _index(value: int) -> int:
    if value < 0:
        raise ValueError("there is no container in that direction")
    return value


class DefaultLayout(_WireEnum):
    BSP = "bsp"
    COLUMNS = "columns"
    ROWS = "rows"
    VERTICAL_STACK = "vertical_stack"
    HORIZONTAL_STACK = "horizontal_stack"
    ULTRAWIDE_VERTICAL_STACK = "ultrawide_vertical_stack"

    @property
    def wire(self) -> str:
        if self is DefaultLayout.BSP:
            return "BSP"
        return super().wire

    def resize(
        self,
        unaltered: Rect,
        resize: Rect | None,
        edge: OperationDirection,
        sizing: Sizing,
        delta: int,
    ) -> Rect | None:
        """Apply a resize of ``delta`` on ``edge``; only the BSP layout can be resized."""
        if self is not DefaultLayout.BSP:
            return None

        left, top, right, bottom = (resize or Rect()).to_data().values()
        increase = sizing is Sizing.INCREASE
        max_width = unaltered.right / _MAX_DIVISOR
        max_height = unaltered.bottom / _MAX_DIVISOR

        if edge is OperationDirection.LEFT:
            candidate = left - delta if increase else left + delta
            if abs(float(candidate)) < max_width:
                left = candidate
        elif edge is OperationDirection.UP:
            if increase:
                if abs(float(top + delta)) < max_height:
                    top -= delta
            elif abs(float(top - delta)) < max_height:
                top += delta
        elif edge is OperationDirection.RIGHT:
            candidate = right + delta if increase else right - delta
            if abs(float(candidate)) < max_width:
                right = candidate
        else:
            candidate = bottom + delta if increase else bottom - delta
            if abs(float(candidate)) < max_height:
                bottom = candidate

        result = Rect(left=left, top=top, right=right, bottom=bottom)
        return None if result == Rect() else result

    def calculate(
        self,
        area: Rect,
        length: int,
        container_padding: int | None,
        layout_flip: Axis | None,
        resize_dimensions: Sequence[Rect | None],
    ) -> list[Rect]:
        """Rectangles for ``length`` containers laid out in ``area``."""
        if length < 1:
            raise ValueError("length must be at least 1")

        if self is DefaultLayout.BSP:
            layouts = recursive_fibonacci(
                0,
                length,
                area,
                layout_flip,
                calculate_resize_adjustments(resize_dimensions),
            )
        elif self is DefaultLayout.COLUMNS:
            layouts = columns(area, length)
        elif self is DefaultLayout.ROWS:
            layouts = rows(area, length)
        elif self is DefaultLayout.VERTICAL_STACK:
            layouts = self._vertical_stack(area, length, layout_flip)
        elif self is DefaultLayout.HORIZONTAL_STACK:
            layouts = self._horizontal_stack(area, length, layout_flip)
        else:
            layouts = self._ultrawide_vertical_stack(area, length, layout_flip)

        return [layout.add_padding(container_padding) for layout in layouts]

    @staticmethod
    def _vertical_stack(area: Rect, length: int, layout_flip: Axis | None) -> list[Rect]:
        primary_right = area.right if length == 1 else _div(area.right, 2)
        main_left = area.left
        stack_left = area.left + primary_right
        if layout_flip in _HORIZONTAL_FLIPS and length > 1:
            main_left = area.left + area.right - primary_right
            stack_left = area.left

        layouts = [Rect(left=main_left, top=area.top, right=primary_right, bottom=area.bottom)]
        if length > 1:
            stack = Rect(
                left=stack_left,
                top=area.top,
                right=area.right - primary_right,
                bottom=area.bottom,
            )
            layouts.extend(rows(stack, length - 1))
        return layouts

    @staticmethod
    def _horizontal_stack(area: Rect, length: int, layout_flip: Axis | None) -> list[Rect]:
        bottom = area.bottom if length == 1 else _div(area.bottom, 2)
        main_top = area.top
        stack_top = area.top + bottom
        if layout_flip in _VERTICAL_FLIPS and length > 1:
            main_top = area.top + area.bottom - bottom
            stack_top = area.top

        layouts = [Rect(left=area.left, top=main_top, right=area.right, bottom=bottom)]
        if length > 1:
            stack = Rect(
                left=area.left,
                top=stack_top,
                right=area.right,
                bottom=area.bottom - bottom,
            )
            layouts.extend(columns(stack, length - 1))
        return layouts

    @staticmethod
    def _ultrawide_vertical_stack(
        area: Rect, length: int, layout_flip: Axis | None
    ) -> list[Rect]:
        primary_right = area.right if length == 1 else _div(area.right, 2)
        if length == 1:
            secondary_right = 0
        elif length == 2:
            secondary_right = area.right - primary_right
        else:
            secondary_right = _div(area.right - primary_right, 2)

        flipped = layout_flip in _HORIZONTAL_FLIPS
        if length == 1:
            primary_left, secondary_left, stack_left = area.left, 0, 0
        elif length == 2:
            if flipped:
                primary_left, secondary_left = area.left, area.left + primary_right
            else:
                primary_left, secondary_left = area.left + secondary_right, area.left
            stack_left = 0
        else:
            primary_left = area.left + secondary_right
            if flipped:
                secondary_left = area.left + primary_right + secondary_right
                stack_left = area.left
            else:
                secondary_left = area.left
                stack_left = area.left + primary_right + secondary_right

        layouts = [
            Rect(left=primary_left, top=area.top, right=primary_right, bottom=area.bottom)
        ]
        if length >= 2:
            layouts.append(
                Rect(
                    left=secondary_left,
                    top=area.top,
                    right=secondary_right,
                    bottom=area.bottom,
                )
            )
        if length > 2:
            stack = Rect(
                left=stack_left,
                top=area.top,
                right=secondary_right,
                bottom=area.bottom,
            )
            layouts.extend(rows(stack, length - 2))
        return layouts

    def index_in_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> int | None:
        """The index reached by moving from ``idx`` in ``op_direction``, or None."""
        if not self.is_valid_direction(op_direction, idx, count):
            return None
        if op_direction is OperationDirection.LEFT:
            return self.left_index(idx)
        if op_direction is OperationDirection.RIGHT:
            return self.right_index(idx)
        if op_direction is OperationDirection.UP:
            return self.up_index(idx)
        return self.down_index(idx)

    def is_valid_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> bool:
        """Whether there is a container in ``op_direction`` from ``idx``."""
        last = count - 1
        if op_direction is OperationDirection.UP:
            return {
                DefaultLayout.BSP: count > 2 and idx not in (0, 1),
                DefaultLayout.COLUMNS: False,
                DefaultLayout.ROWS: idx != 0,
                DefaultLayout.HORIZONTAL_STACK: idx != 0,
                DefaultLayout.VERTICAL_STACK: idx not in (0, 1),
                DefaultLayout.ULTRAWIDE_VERTICAL_STACK: idx > 2,
            }[self]
        if op_direction is OperationDirection.DOWN:
            return {
                DefaultLayout.BSP: count > 2 and idx != last and idx % 2 != 0,
                DefaultLayout.COLUMNS: False,
                DefaultLayout.ROWS: idx != last,
                DefaultLayout.VERTICAL_STACK: idx != 0 and idx != last,
                DefaultLayout.HORIZONTAL_STACK: idx == 0,
                DefaultLayout.ULTRAWIDE_VERTICAL_STACK: idx > 1 and idx != last,
            }[self]
        if op_direction is OperationDirection.LEFT:
            return {
                DefaultLayout.BSP: count > 1 and idx != 0,
                DefaultLayout.COLUMNS: idx != 0,
                DefaultLayout.VERTICAL_STACK: idx != 0,
                DefaultLayout.ROWS: False,
                DefaultLayout.HORIZONTAL_STACK: idx not in (0, 1),
                DefaultLayout.ULTRAWIDE_VERTICAL_STACK: count > 1 and idx != 1,
            }[self]
        if self is DefaultLayout.ULTRAWIDE_VERTICAL_STACK:
            if count <= 1:
                return False
            if count == 2:
                return idx != 0
            return idx < 2
        return {
            DefaultLayout.BSP: count > 1 and idx % 2 == 0 and idx != last,
            DefaultLayout.COLUMNS: idx != last,
            DefaultLayout.ROWS: False,
            DefaultLayout.VERTICAL_STACK: idx == 0,
            DefaultLayout.HORIZONTAL_STACK: idx != 0 and idx != last,
        }[self]

    def up_index(self, idx: int) -> int:
        """The index above ``idx``."""
        if self is DefaultLayout.BSP:
            return _index(idx - 1 if idx % 2 == 0 else idx - 2)
        if self is DefaultLayout.COLUMNS:
            raise ValueError("columns have no container above")
        if self is DefaultLayout.HORIZONTAL_STACK:
            return 0
        return _index(idx - 1)

    def down_index(self, idx: int) -> int:
        """The index below ``idx``."""
        if self is DefaultLayout.COLUMNS:
            raise ValueError("columns have no container below")
        if self is DefaultLayout.HORIZONTAL_STACK:
            return 1
        return idx + 1

    def left_index(self, idx: int) -> int:
        """The index to the left of ``idx``."""
        if self is DefaultLayout.BSP:
            return _index(idx - 2 if idx % 2 == 0 else idx - 1)
        if self in (DefaultLayout.COLUMNS, DefaultLayout.HORIZONTAL_STACK):
            return _index(idx - 1)
        if self is DefaultLayout.ROWS:
            raise ValueError("rows have no container to the left")
        if self is DefaultLayout.VERTICAL_STACK:
            return 0
        if idx == 0:
            return 1
        if idx == 1:
            raise ValueError("there is no container to the left")
        return 0

    def right_index(self, idx: int) -> int:
        """The index to the right of ``idx``."""
        if self in (DefaultLayout.BSP, DefaultLayout.COLUMNS, DefaultLayout.HORIZONTAL_STACK):
            return idx + 1
        if self is DefaultLayout.ROWS:
            raise ValueError("rows have no container to the right")
        if self is DefaultLayout.VERTICAL_STACK:
            return 1
        if idx == 1:
            return 0
        if idx == 0:
            return 2
        raise ValueError("there is no container to the right")