import pytest

from tilekit.arrangement import (
    calculate_resize_adjustments,
    columns,
    recursive_fibonacci,
    rows,
)
from tilekit.options import Axis
from tilekit.rect import Rect

AREA = Rect(0, 0, 1000, 800)
SQUARE = Rect(0, 0, 1024, 1024)


@pytest.mark.parametrize("length", [1, 2, 4, 5])
def test_columns_are_contiguous(length):
    area = Rect(40, 30, 1000, 600)
    result = columns(area, length)
    assert len(result) == length
    assert result[0].left == area.left
    for before, after in zip(result, result[1:]):
        assert after.left == before.left + before.right
    assert all(r.top == area.top and r.bottom == area.bottom for r in result)
    assert len({r.right for r in result}) == 1


@pytest.mark.parametrize("length", [1, 2, 3, 8])
def test_rows_are_contiguous(length):
    area = Rect(40, 30, 1000, 600)
    result = rows(area, length)
    assert len(result) == length
    assert result[0].top == area.top
    for before, after in zip(result, result[1:]):
        assert after.top == before.top + before.bottom
    assert all(r.left == area.left and r.right == area.right for r in result)


def test_single_column_is_whole_area():
    assert columns(AREA, 1) == [AREA]
    assert rows(AREA, 1) == [AREA]


@pytest.mark.parametrize("split", [columns, rows])
def test_zero_length_raises(split):
    with pytest.raises(ValueError):
        split(AREA, 0)


def test_resize_adjustments_without_resizes():
    assert calculate_resize_adjustments([None, None, None]) == [None, None, None]


def test_resize_left_moves_to_previous_window():
    result = calculate_resize_adjustments([None, Rect(left=50)])
    assert result == [Rect(right=50), None]


def test_resize_left_adds_to_existing_adjustment():
    result = calculate_resize_adjustments([Rect(right=20), Rect(left=50)])
    assert result == [Rect(right=20 + 50), None]


def test_resize_top_of_second_window_is_dropped():
    assert calculate_resize_adjustments([None, Rect(top=30)]) == [None, None]


def test_resize_top_moves_to_odd_neighbour():
    result = calculate_resize_adjustments([None, None, Rect(top=20)])
    assert result == [None, Rect(bottom=20), None]


def test_resize_right_is_kept():
    result = calculate_resize_adjustments([Rect(right=15), None])
    assert result == [Rect(right=15), None]


def test_fibonacci_empty_and_single():
    assert recursive_fibonacci(0, 0, AREA, None, []) == []
    assert recursive_fibonacci(0, 1, AREA, None, []) == [AREA]


def test_fibonacci_two_windows_split_vertically():
    assert recursive_fibonacci(0, 2, AREA, None, []) == [
        Rect(0, 0, 500, 800),
        Rect(500, 0, 500, 800),
    ]


def test_fibonacci_horizontal_flip_mirrors_two_windows():
    plain = recursive_fibonacci(0, 2, AREA, None, [])
    flipped = recursive_fibonacci(0, 2, AREA, Axis.HORIZONTAL, [])
    assert flipped[0].left == plain[1].left
    assert flipped[1].left == plain[0].left
    assert [r.right for r in flipped] == [r.right for r in plain]


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5])
@pytest.mark.parametrize(
    "flip", [None, Axis.HORIZONTAL, Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL]
)
def test_fibonacci_covers_whole_area(count, flip):
    result = recursive_fibonacci(0, count, SQUARE, flip, [])
    assert len(result) == count
    assert sum(r.right * r.bottom for r in result) == SQUARE.right * SQUARE.bottom
    for rect in result:
        assert SQUARE.contains_point((rect.left, rect.top))
        assert SQUARE.contains_point((rect.left + rect.right, rect.top + rect.bottom))


def test_fibonacci_resize_widens_first_window():
    plain = recursive_fibonacci(0, 2, AREA, None, [])
    resized = recursive_fibonacci(0, 2, AREA, None, [Rect(right=100)])
    assert resized[0].right > plain[0].right
    assert resized[0].right + resized[1].right == AREA.right
    assert resized[1].left == resized[0].left + resized[0].right


def test_fibonacci_ignores_adjustments_beyond_list():
    plain = recursive_fibonacci(0, 3, AREA, None, [])
    assert recursive_fibonacci(0, 3, AREA, None, [None]) == plain