"""User-defined column layouts: validation, arrangement and directional navigation."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from tilekit.arrangement import _div, columns, rows
from tilekit.default_layout import DefaultLayout
from tilekit.operation_direction import OperationDirection
from tilekit.options import Axis
from tilekit.rect import Rect

_WIDTH_PERCENTAGE = "WidthPercentage"


class ColumnKind(Enum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"


class ColumnSplit(Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


def _count(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer")
    return value


@dataclass(frozen=True)
class ColumnSplitWithCapacity:
    """A column split in ``split`` direction holding a fixed number of containers."""

    split: ColumnSplit
    capacity: int

    def __post_init__(self) -> None:
        if not isinstance(self.split, ColumnSplit):
            raise ValueError("split must be a ColumnSplit")
        _count(self.capacity, "capacity")


@dataclass(frozen=True)
class Column:
    """One column of a custom layout.

    A primary column may carry a width percentage, a secondary column may carry a
    split with a capacity, and a tertiary column always carries a split.
    """

    kind: ColumnKind
    width_percentage: int | None = None
    split: ColumnSplitWithCapacity | ColumnSplit | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ColumnKind):
            raise ValueError("kind must be a ColumnKind")
        if self.kind is not ColumnKind.PRIMARY and self.width_percentage is not None:
            raise ValueError("only a primary column can have a width percentage")
        if self.width_percentage is not None:
            _count(self.width_percentage, "width percentage")
        if self.kind is ColumnKind.PRIMARY and self.split is not None:
            raise ValueError("a primary column cannot be split")
        if self.kind is ColumnKind.SECONDARY and not (
            self.split is None or isinstance(self.split, ColumnSplitWithCapacity)
        ):
            raise ValueError("a secondary column split must have a capacity")
        if self.kind is ColumnKind.TERTIARY and not isinstance(self.split, ColumnSplit):
            raise ValueError("a tertiary column needs a split without capacity")

    @property
    def capacity(self) -> int | None:
        """How many containers this column holds, or None for the tertiary column."""
        if self.kind is ColumnKind.TERTIARY:
            return None
        if isinstance(self.split, ColumnSplitWithCapacity):
            return self.split.capacity
        return 1

    @property
    def splits_horizontally(self) -> bool:
        """Whether containers in this column are stacked on top of each other."""
        if isinstance(self.split, ColumnSplitWithCapacity):
            return self.split.split is ColumnSplit.HORIZONTAL
        return self.split is ColumnSplit.HORIZONTAL

    def to_data(self) -> dict[str, Any]:
        """Mapping form with ``column`` and ``configuration`` keys."""
        configuration: Any = None
        if self.kind is ColumnKind.PRIMARY and self.width_percentage is not None:
            configuration = {_WIDTH_PERCENTAGE: self.width_percentage}
        elif isinstance(self.split, ColumnSplitWithCapacity):
            configuration = {self.split.split.value: self.split.capacity}
        elif isinstance(self.split, ColumnSplit):
            configuration = self.split.value
        return {"column": self.kind.value, "configuration": configuration}

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Column:
        """Build a column from its mapping form."""
        if not isinstance(data, Mapping):
            raise ValueError("a column must be a mapping")
        try:
            kind = ColumnKind(data.get("column"))
        except ValueError:
            raise ValueError(f"unknown column kind: {data.get('column')!r}") from None
        configuration = data.get("configuration")

        if kind is ColumnKind.TERTIARY:
            return cls(kind, split=_parse_split(configuration))
        if configuration is None:
            return cls(kind)
        if not isinstance(configuration, Mapping) or len(configuration) != 1:
            raise ValueError(f"invalid configuration for a {kind.value} column")
        ((key, value),) = configuration.items()
        if kind is ColumnKind.PRIMARY:
            if key != _WIDTH_PERCENTAGE:
                raise ValueError(f"unknown primary column configuration: {key!r}")
            return cls(kind, width_percentage=_count(value, "width percentage"))
        return cls(
            kind,
            split=ColumnSplitWithCapacity(_parse_split(key), _count(value, "capacity")),
        )


def _parse_split(value: Any) -> ColumnSplit:
    try:
        return ColumnSplit(value)
    except ValueError:
        raise ValueError(f"unknown column split: {value!r}") from None


@dataclass
class CustomLayout:
    """An ordered list of columns describing a user-defined layout."""

    columns: list[Column] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.columns = list(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __getitem__(self, idx: int) -> Column:
        return self.columns[idx]

    @classmethod
    def from_path(cls, path: str | Path) -> CustomLayout:
        """Load and validate a layout from a JSON or YAML file."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix in (".yaml", ".yml"):
            with path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        elif suffix == ".json":
            with path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        else:
            raise ValueError("custom layouts must be json or yaml files")

        layout = cls.from_data(data)
        if not layout.is_valid():
            raise ValueError("the layout file provided was invalid")
        return layout

    @classmethod
    def from_data(cls, data: Iterable[Mapping[str, Any]]) -> CustomLayout:
        """Build a layout from a list of column mappings."""
        if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Iterable):
            raise ValueError("a custom layout must be a list of columns")
        return cls([Column.from_data(item) for item in data])

    def to_data(self) -> list[dict[str, Any]]:
        """List-of-mappings form."""
        return [column.to_data() for column in self.columns]

    def column_with_idx(self, idx: int) -> tuple[int, Column | None]:
        """The column index holding container ``idx`` and that column, if any."""
        column_idx = self.column_for_container_idx(idx)
        column = self.columns[column_idx] if 0 <= column_idx < len(self.columns) else None
        return column_idx, column

    def primary_idx(self) -> int | None:
        """Index of the first primary column."""
        return next(
            (i for i, c in enumerate(self.columns) if c.kind is ColumnKind.PRIMARY), None
        )

    def primary_width_percentage(self) -> int | None:
        """Width percentage of the first primary column that declares one."""
        return next(
            (
                c.width_percentage
                for c in self.columns
                if c.kind is ColumnKind.PRIMARY and c.width_percentage is not None
            ),
            None,
        )

    def set_primary_width_percentage(self, percentage: int) -> None:
        """Change the width of every primary column that already declares one."""
        _count(percentage, "width percentage")
        self.columns = [
            replace(c, width_percentage=percentage)
            if c.kind is ColumnKind.PRIMARY and c.width_percentage is not None
            else c
            for c in self.columns
        ]

    def is_valid(self) -> bool:
        """Whether this layout can be arranged."""
        if not self.columns:
            return False
        for column in self.columns:
            if column.kind is ColumnKind.PRIMARY:
                continue
            if column.split is not None and not column.splits_horizontally:
                return False
        if self.columns[-1].kind is not ColumnKind.TERTIARY:
            return False
        kinds = [c.kind for c in self.columns]
        return kinds.count(ColumnKind.PRIMARY) == 1 and kinds.count(ColumnKind.TERTIARY) == 1

    def column_container_counts(self) -> dict[int, int]:
        """Container capacity of each non-tertiary column, keyed by column index."""
        return {
            idx: column.capacity
            for idx, column in enumerate(self.columns)
            if column.capacity is not None
        }

    def first_container_idx(self, col_idx: int) -> int:
        """Index of the first container placed in column ``col_idx``."""
        counts = self.column_container_counts()
        return sum(counts.get(i, 0) for i in range(col_idx))

    def column_for_container_idx(self, idx: int) -> int:
        """Index of the column that holds container ``idx``."""
        if not self.columns:
            raise ValueError("a custom layout must have at least one column")
        counts = self.column_container_counts()
        accumulated = 0
        for i in range(len(self.columns) - 1):
            if i in counts:
                accumulated += counts[i]
                if accumulated > idx:
                    return i
        return len(self.columns) - 1

    def column_area(self, work_area: Rect, idx: int, offset: int | None) -> Rect:
        """Area of column ``idx`` when all columns share the width equally."""
        divisor = len(self.columns) - (offset or 0)
        width = _div(work_area.right, divisor)
        return Rect(
            left=work_area.left + width * idx,
            top=work_area.top,
            right=width,
            bottom=work_area.bottom,
        )

    @staticmethod
    def column_area_with_last(
        length: int,
        work_area: Rect,
        primary_right: int,
        last_column: Rect | None,
        offset: int | None,
    ) -> Rect:
        """Area of a non-primary column placed right after ``last_column``."""
        divisor = length - (offset or 0) - 1
        width = _div(work_area.right - primary_right, divisor)
        left = work_area.left if last_column is None else last_column.left + last_column.right
        return Rect(left=left, top=work_area.top, right=width, bottom=work_area.bottom)

    @staticmethod
    def main_column_area(
        work_area: Rect, primary_right: int, last_column: Rect | None
    ) -> Rect:
        """Area of a primary column with a fixed width placed after ``last_column``."""
        left = work_area.left if last_column is None else last_column.left + last_column.right
        return Rect(left=left, top=work_area.top, right=primary_right, bottom=work_area.bottom)

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
        if not self.columns:
            raise ValueError("a custom layout must have at least one column")

        if length <= len(self.columns):
            layouts = columns(area, length)
        else:
            layouts = self._arrange(area, length)

        return [layout.add_padding(container_padding) for layout in layouts]

    def _arrange(self, area: Rect, length: int) -> list[Rect]:
        size = len(self.columns)
        counts = self.column_container_counts()

        threshold = 0
        for i in range(size - 1):
            if i not in counts:
                raise ValueError("only the final column may be a tertiary column")
            threshold += counts[i]

        # Until there are enough containers for the tertiary column, leave it out
        # so that the other columns can use its space.
        offset = None if length > threshold else 1

        percentage = self.primary_width_percentage()
        if percentage is None:
            primary_right = _div(area.right, size)
        else:
            primary_right = _div(area.right, 100) * percentage

        dimensions: list[Rect] = []
        for idx, column in enumerate(self.columns[: size - (offset or 0)]):
            last = dimensions[self.first_container_idx(idx - 1)] if idx > 0 else None
            column_area = self.column_area_with_last(size, area, primary_right, last, offset)

            if column.kind is ColumnKind.PRIMARY and column.width_percentage is not None:
                dimensions.append(self.main_column_area(area, primary_right, last))
            elif column.kind is ColumnKind.TERTIARY:
                remaining = length - threshold
                split = rows if column.split is ColumnSplit.HORIZONTAL else columns
                dimensions.extend(split(column_area, remaining))
            elif isinstance(column.split, ColumnSplitWithCapacity):
                split = rows if column.split.split is ColumnSplit.HORIZONTAL else columns
                dimensions.extend(split(column_area, column.split.capacity))
            else:
                dimensions.append(column_area)

        return dimensions

    def index_in_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> int | None:
        """The index reached by moving from ``idx`` in ``op_direction``, or None."""
        if count <= len(self.columns):
            return DefaultLayout.COLUMNS.index_in_direction(op_direction, idx, count)
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
        if count <= len(self.columns):
            return DefaultLayout.COLUMNS.is_valid_direction(op_direction, idx, count)

        if op_direction is OperationDirection.LEFT:
            return idx != 0 and self.column_for_container_idx(idx) != 0
        if op_direction is OperationDirection.RIGHT:
            return (
                idx != count - 1
                and self.column_for_container_idx(idx) != len(self.columns) - 1
            )

        if op_direction is OperationDirection.UP:
            if idx == 0:
                return False
            neighbour = idx - 1
        else:
            if idx == count - 1:
                return False
            neighbour = idx + 1

        column_idx, column = self.column_with_idx(idx)
        if column is None or column.kind is ColumnKind.PRIMARY:
            return False
        if column.split is None or not column.splits_horizontally:
            return False
        return self.column_for_container_idx(neighbour) == column_idx

    def up_index(self, idx: int) -> int:
        """The index above ``idx``."""
        if idx < 1:
            raise ValueError("there is no container above")
        return idx - 1

    def down_index(self, idx: int) -> int:
        """The index below ``idx``."""
        return idx + 1

    def left_index(self, idx: int) -> int:
        """The first index of the column to the left of ``idx``."""
        column_idx = self.column_for_container_idx(idx)
        if column_idx == 0:
            raise ValueError("there is no column to the left")
        if column_idx - 1 == 0:
            return 0
        return self.first_container_idx(column_idx - 1)

    def right_index(self, idx: int) -> int:
        """The first index of the column to the right of ``idx``."""
        return self.first_container_idx(self.column_for_container_idx(idx) + 1)