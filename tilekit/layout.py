"""A workspace layout: either one of the built-in layouts or a custom one."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from tilekit.custom_layout import CustomLayout
from tilekit.default_layout import DefaultLayout

Layout = Union[DefaultLayout, CustomLayout]

_DEFAULT = "Default"
_CUSTOM = "Custom"


def layout_to_data(layout: Layout) -> dict[str, Any]:
    """Mapping form of a layout, tagged with ``Default`` or ``Custom``."""
    if isinstance(layout, DefaultLayout):
        return {_DEFAULT: layout.wire}
    if isinstance(layout, CustomLayout):
        return {_CUSTOM: layout.to_data()}
    raise TypeError(f"not a layout: {type(layout).__name__}")


def layout_from_data(data: Mapping[str, Any]) -> Layout:
    """Build a layout from its tagged mapping form."""
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError("a layout must be a mapping with exactly one of 'Default' or 'Custom'")
    ((key, value),) = data.items()
    if key == _DEFAULT:
        if not isinstance(value, str):
            raise ValueError("a default layout must be named by a string")
        return DefaultLayout.from_wire(value)
    if key == _CUSTOM:
        return CustomLayout.from_data(value)
    raise ValueError(f"unknown layout kind: {key!r}")