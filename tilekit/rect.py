"""Screen rectangles expressed as an origin plus a width and a height."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_FIELDS = ("left", "top", "right", "bottom")


@dataclass(frozen=True)
class Rect:
    """A rectangle whose ``right`` is its width and ``bottom`` its height."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def from_corners(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Build a rect from absolute corner coordinates."""
        return cls(left=left, top=top, right=right - left, bottom=bottom - top)

    def add_padding(self, padding: int | None) -> Rect:
        """Return this rect shrunk by ``padding`` on every side."""
        if padding is None:
            return self
        return Rect(
            left=self.left + padding,
            top=self.top + padding,
            right=self.right - padding * 2,
            bottom=self.bottom - padding * 2,
        )

    def contains_point(self, point: tuple[int, int]) -> bool:
        """Whether the ``(x, y)`` point lies inside this rect, edges included."""
        x, y = point
        return (
            self.left <= x <= self.left + self.right
            and self.top <= y <= self.top + self.bottom
        )

    def to_data(self) -> dict[str, int]:
        """Plain mapping form, as used in JSON documents."""
        return {name: getattr(self, name) for name in _FIELDS}

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Rect:
        """Build a rect from its mapping form."""
        if not isinstance(data, Mapping):
            raise ValueError(f"a rect must be a mapping, not {type(data).__name__}")
        values = {}
        for name in _FIELDS:
            if name not in data:
                raise ValueError(f"rect is missing the field {name!r}")
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"rect field {name!r} must be an integer")
            values[name] = value
        return cls(**values)