"""Splitting a work area into window rectangles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from tilekit.options import Axis
from tilekit.rect import Rect


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _check_length(length: int) -> None:
    if length < 1:
        raise ValueError("length must be at least 1")


def columns(area: Rect, length: int) -> list[Rect]:
    """Split ``area`` into ``length`` equal side-by-side columns."""
    _check_length(length)
    width = _div(area.right, length)
    return [
        Rect(left=area.left + width * n, top=area.top, right=width, bottom=area.bottom)
        for n in range(length)
    ]


def rows(area: Rect, length: int) -> list[Rect]:
    """Split ``area`` into ``length`` equal stacked rows."""
    _check_length(length)
    height = _div(area.bottom, length)
    return [
        Rect(left=area.left, top=area.top + height * n, right=area.right, bottom=height)
        for n in range(length)
    ]


def calculate_resize_adjustments(
    resize_dimensions: Sequence[Rect | None],
) -> list[Rect | None]:
    """Move left and top resizes onto the neighbouring windows that own those edges."""
    adjustments: list[Rect | None] = list(resize_dimensions)

    for i, resize_ref in enumerate(resize_dimensions):
        if resize_ref is None or i == 0:
            continue

        if resize_ref.left != 0:
            if i == 1:
                neighbours = range(0, 1)
            elif i % 2 != 0:
                neighbours = range(i - 1, i)
            else:
                neighbours = range(i - 2, i)

            for n in neighbours:
                if n % 2 == 0:
                    current = adjustments[n]
                    if current is not None:
                        adjustments[n] = replace(current, right=current.right + resize_ref.left)
                    else:
                        adjustments[n] = Rect(right=resize_ref.left)

            if adjustments[i] is not None:
                adjustments[i] = replace(adjustments[i], left=0)

        if resize_ref.top != 0:
            if i == 1:
                neighbours = range(0, 1)
            elif i % 2 == 0:
                neighbours = range(i - 1, i)
            else:
                neighbours = range(i - 2, i)

            for n in neighbours:
                if n % 2 != 0:
                    current = adjustments[n]
                    if current is not None:
                        adjustments[n] = replace(current, bottom=current.bottom + resize_ref.top)
                    else:
                        adjustments[n] = Rect(bottom=resize_ref.top)

            if adjustments[i] is not None:
                adjustments[i] = replace(adjustments[i], top=0)

    return [None if adjustment == Rect() else adjustment for adjustment in adjustments]


def recursive_fibonacci(
    idx: int,
    count: int,
    area: Rect,
    layout_flip: Axis | None,
    resize_adjustments: Sequence[Rect | None],
) -> list[Rect]:
    """Lay out ``count`` windows as a binary space partition starting at ``idx``."""
    layouts: list[Rect] = []

    while count > 0:
        adjustment = resize_adjustments[idx] if idx < len(resize_adjustments) else None
        if adjustment is not None:
            resized = Rect(
                left=area.left + adjustment.left,
                top=area.top + adjustment.top,
                right=area.right + adjustment.right,
                bottom=area.bottom + adjustment.bottom,
            )
        else:
            resized = area

        if count == 1:
            layouts.append(resized)
            break

        half_width = _div(area.right, 2)
        half_height = _div(area.bottom, 2)
        half_resized_width = _div(resized.right, 2)
        half_resized_height = _div(resized.bottom, 2)

        main_x = resized.left
        alt_x = resized.left + half_resized_width
        main_y = resized.top
        alt_y = resized.top + half_resized_height

        if layout_flip in (Axis.HORIZONTAL, Axis.HORIZONTAL_AND_VERTICAL):
            main_x = resized.left + half_width + (half_width - half_resized_width)
            alt_x = resized.left
        if layout_flip in (Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL):
            main_y = resized.top + half_height + (half_height - half_resized_height)
            alt_y = resized.top

        if idx % 2 != 0:
            layouts.append(
                Rect(
                    left=resized.left,
                    top=main_y,
                    right=resized.right,
                    bottom=half_resized_height,
                )
            )
            area = Rect(
                left=area.left,
                top=alt_y,
                right=area.right,
                bottom=area.bottom - half_resized_height,
            )
        else:
            layouts.append(
                Rect(
                    left=main_x,
                    top=resized.top,
                    right=half_resized_width,
                    bottom=resized.bottom,
                )
            )
            area = Rect(
                left=alt_x,
                top=area.top,
                right=area.right - half_resized_width,
                bottom=area.bottom,
            )

        idx += 1
        count -= 1

    return layouts