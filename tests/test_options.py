import pytest

from tilekit.options import (
    ApplicationIdentifier,
    Axis,
    FocusFollowsMouseImplementation,
    HidingBehaviour,
    MoveBehaviour,
    OperationBehaviour,
    Sizing,
    StateQuery,
    WindowContainerBehaviour,
    WindowKind,
)


def test_parse_round_trips_display():
    assert all(Axis.parse(str(m)) is m for m in Axis)
    assert all(WindowKind.parse(str(m)) is m for m in WindowKind)
    assert all(StateQuery.parse(str(m)) is m for m in StateQuery)
    assert all(
        ApplicationIdentifier.parse(str(m)) is m for m in ApplicationIdentifier
    )
    assert all(
        FocusFollowsMouseImplementation.parse(str(m)) is m
        for m in FocusFollowsMouseImplementation
    )
    assert all(
        WindowContainerBehaviour.parse(str(m)) is m for m in WindowContainerBehaviour
    )
    assert all(MoveBehaviour.parse(str(m)) is m for m in MoveBehaviour)
    assert all(HidingBehaviour.parse(str(m)) is m for m in HidingBehaviour)
    assert all(OperationBehaviour.parse(str(m)) is m for m in OperationBehaviour)
    assert all(Sizing.parse(str(m)) is m for m in Sizing)


def test_wire_round_trip():
    assert all(Axis.from_wire(m.wire) is m for m in Axis)
    assert all(WindowKind.from_wire(m.wire) is m for m in WindowKind)
    assert all(StateQuery.from_wire(m.wire) is m for m in StateQuery)
    assert all(
        ApplicationIdentifier.from_wire(m.wire) is m for m in ApplicationIdentifier
    )
    assert all(
        FocusFollowsMouseImplementation.from_wire(m.wire) is m
        for m in FocusFollowsMouseImplementation
    )
    assert all(
        WindowContainerBehaviour.from_wire(m.wire) is m
        for m in WindowContainerBehaviour
    )
    assert all(MoveBehaviour.from_wire(m.wire) is m for m in MoveBehaviour)
    assert all(HidingBehaviour.from_wire(m.wire) is m for m in HidingBehaviour)
    assert all(OperationBehaviour.from_wire(m.wire) is m for m in OperationBehaviour)
    assert all(Sizing.from_wire(m.wire) is m for m in Sizing)


def test_parse_unknown_raises():
    with pytest.raises(ValueError):
        Axis.parse("no-such-value")
    with pytest.raises(ValueError):
        WindowKind.parse("no-such-value")
    with pytest.raises(ValueError):
        StateQuery.parse("no-such-value")
    with pytest.raises(ValueError):
        ApplicationIdentifier.parse("no-such-value")
    with pytest.raises(ValueError):
        FocusFollowsMouseImplementation.parse("no-such-value")
    with pytest.raises(ValueError):
        WindowContainerBehaviour.parse("no-such-value")
    with pytest.raises(ValueError):
        MoveBehaviour.parse("no-such-value")
    with pytest.raises(ValueError):
        HidingBehaviour.parse("no-such-value")
    with pytest.raises(ValueError):
        OperationBehaviour.parse("no-such-value")
    with pytest.raises(ValueError):
        Sizing.parse("no-such-value")


def test_display_is_snake_case():
    assert str(Axis.HORIZONTAL_AND_VERTICAL) == "horizontal_and_vertical"
    assert f"{OperationBehaviour.NO_OP}" == "no_op"
    assert Axis.parse("horizontal_and_vertical") is Axis.HORIZONTAL_AND_VERTICAL
    assert OperationBehaviour.parse("no_op") is OperationBehaviour.NO_OP


def test_wire_is_pascal_case():
    assert Axis.HORIZONTAL_AND_VERTICAL.wire == "HorizontalAndVertical"
    assert Axis.from_wire("HorizontalAndVertical") is Axis.HORIZONTAL_AND_VERTICAL


def test_application_identifier_wire_is_snake_case():
    assert ApplicationIdentifier.EXE.wire == "exe"
    assert ApplicationIdentifier.from_wire("exe") is ApplicationIdentifier.EXE


def test_from_wire_unknown_raises():
    with pytest.raises(ValueError):
        WindowKind.from_wire("single")


@pytest.mark.parametrize("value, adjustment", [(0, 5), (10, 3), (-4, 2)])
def test_increase_adds(value, adjustment):
    assert Sizing.INCREASE.adjust_by(value, adjustment) == value + adjustment


def test_decrease_subtracts():
    assert Sizing.DECREASE.adjust_by(10, 4) == 6


@pytest.mark.parametrize("value, adjustment", [(3, 5), (0, 1), (-2, 1)])
def test_decrease_never_goes_negative(value, adjustment):
    assert Sizing.DECREASE.adjust_by(value, adjustment) == value


def test_decrease_to_exactly_zero():
    assert Sizing.DECREASE.adjust_by(7, 7) == 0