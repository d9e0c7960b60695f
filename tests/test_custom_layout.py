import json

import pytest

from tilekit.arrangement import columns
from tilekit.custom_layout import (
    Column,
    ColumnKind,
    ColumnSplit,
    ColumnSplitWithCapacity,
    CustomLayout,
)
from tilekit.default_layout import DefaultLayout
from tilekit.operation_direction import OperationDirection
from tilekit.rect import Rect


def _layout(width=None):
    return CustomLayout(
        [
            Column(ColumnKind.PRIMARY, width_percentage=width),
            Column(
                ColumnKind.SECONDARY,
                split=ColumnSplitWithCapacity(ColumnSplit.HORIZONTAL, 2),
            ),
            Column(ColumnKind.TERTIARY, split=ColumnSplit.HORIZONTAL),
        ]
    )


AREA = Rect(left=0, top=0, right=900, bottom=600)


def _total_area(rects):
    return sum(r.right * r.bottom for r in rects)


def test_column_data_format_for_tertiary():
    column = Column(ColumnKind.TERTIARY, split=ColumnSplit.HORIZONTAL)
    assert column.to_data() == {"column": "Tertiary", "configuration": "Horizontal"}


def test_column_data_format_for_primary_width():
    column = Column(ColumnKind.PRIMARY, width_percentage=45)
    assert column.to_data() == {"column": "Primary", "configuration": {"WidthPercentage": 45}}


def test_column_from_data_missing_configuration():
    assert Column.from_data({"column": "Secondary"}) == Column(ColumnKind.SECONDARY)


def test_column_round_trip():
    for column in _layout(50):
        assert Column.from_data(column.to_data()) == column


def test_column_from_data_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Column.from_data({"column": "Quaternary"})


def test_tertiary_needs_split():
    with pytest.raises(ValueError):
        Column(ColumnKind.TERTIARY)


def test_layout_round_trip():
    layout = _layout(40)
    assert CustomLayout.from_data(layout.to_data()) == layout


def test_is_valid():
    assert _layout().is_valid()
    assert not CustomLayout([]).is_valid()
    assert not CustomLayout([Column(ColumnKind.PRIMARY)]).is_valid()
    vertical = CustomLayout(
        [
            Column(ColumnKind.PRIMARY),
            Column(ColumnKind.TERTIARY, split=ColumnSplit.VERTICAL),
        ]
    )
    assert not vertical.is_valid()
    two_primaries = CustomLayout(
        [
            Column(ColumnKind.PRIMARY),
            Column(ColumnKind.PRIMARY),
            Column(ColumnKind.TERTIARY, split=ColumnSplit.HORIZONTAL),
        ]
    )
    assert not two_primaries.is_valid()


def test_primary_width_percentage_and_setter():
    layout = _layout(50)
    assert layout.primary_idx() == 0
    assert layout.primary_width_percentage() == 50
    layout.set_primary_width_percentage(60)
    assert layout.primary_width_percentage() == 60


def test_setter_ignores_primary_without_width():
    layout = _layout()
    layout.set_primary_width_percentage(60)
    assert layout.primary_width_percentage() is None


def test_container_counts_and_indices():
    layout = _layout()
    assert layout.column_container_counts() == {0: 1, 1: 2}
    assert layout.first_container_idx(2) == 3
    assert [layout.column_for_container_idx(i) for i in range(6)] == [0, 1, 1, 2, 2, 2]
    assert layout.column_with_idx(4) == (2, layout[2])


def test_first_container_idx_consistent_with_column_lookup():
    layout = _layout()
    for idx in range(8):
        col = layout.column_for_container_idx(idx)
        assert layout.first_container_idx(col) <= idx


def test_column_area_equal_widths_tile():
    layout = _layout()
    areas = [layout.column_area(AREA, i, None) for i in range(len(layout))]
    assert areas == columns(AREA, len(layout))


def test_calculate_few_containers_uses_columns():
    assert _layout().calculate(AREA, 2, None, None, []) == columns(AREA, 2)


def test_calculate_worked_example():
    result = _layout().calculate(AREA, 4, None, None, [])
    assert len(result) == 4
    assert result[0] == Rect(left=0, top=0, right=300, bottom=600)
    assert _total_area(result) == AREA.right * AREA.bottom


def test_calculate_tiles_with_primary_width_without_tertiary():
    result = _layout(50).calculate(AREA, 3, None, None, [])
    assert len(result) == 3
    assert _total_area(result) == AREA.right * AREA.bottom
    assert result[0].right == AREA.right // 2


def test_calculate_tertiary_absorbs_extra_containers():
    result = _layout().calculate(AREA, 7, None, None, [])
    assert len(result) == 7
    tertiary = result[3:]
    assert len({r.left for r in tertiary}) == 1


def test_calculate_applies_padding():
    plain = _layout().calculate(AREA, 4, None, None, [])
    padded = _layout().calculate(AREA, 4, 5, None, [])
    assert padded == [r.add_padding(5) for r in plain]


def test_calculate_rejects_zero_length():
    with pytest.raises(ValueError):
        _layout().calculate(AREA, 0, None, None, [])


def test_direction_delegates_to_columns_when_few():
    layout = _layout()
    for direction in OperationDirection:
        assert layout.index_in_direction(direction, 1, 3) == (
            DefaultLayout.COLUMNS.index_in_direction(direction, 1, 3)
        )


def test_direction_navigation():
    layout = _layout()
    assert layout.index_in_direction(OperationDirection.UP, 1, 5) is None
    assert layout.index_in_direction(OperationDirection.UP, 2, 5) == 1
    assert layout.index_in_direction(OperationDirection.DOWN, 1, 5) == 2
    assert layout.index_in_direction(OperationDirection.DOWN, 2, 5) is None
    assert layout.index_in_direction(OperationDirection.RIGHT, 0, 5) == 1
    assert layout.index_in_direction(OperationDirection.LEFT, 3, 5) == 1
    assert layout.index_in_direction(OperationDirection.LEFT, 1, 5) == 0
    assert layout.index_in_direction(OperationDirection.LEFT, 0, 5) is None
    assert layout.index_in_direction(OperationDirection.RIGHT, 4, 5) is None


def test_left_index_from_first_column_raises():
    with pytest.raises(ValueError):
        _layout().left_index(0)


def test_from_path_json(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(_layout().to_data()), encoding="utf-8")
    assert CustomLayout.from_path(path) == _layout()


def test_from_path_yaml(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(
        "- column: Primary\n"
        "  configuration:\n"
        "    WidthPercentage: 50\n"
        "- column: Secondary\n"
        "  configuration:\n"
        "    Horizontal: 2\n"
        "- column: Tertiary\n"
        "  configuration: Horizontal\n",
        encoding="utf-8",
    )
    assert CustomLayout.from_path(path) == _layout(50)


def test_from_path_rejects_extension(tmp_path):
    path = tmp_path / "layout.txt"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="json or yaml"):
        CustomLayout.from_path(path)


def test_from_path_rejects_invalid_layout(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps([{"column": "Primary"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="invalid"):
        CustomLayout.from_path(path)