"""Named options shared by layouts, messages and configuration."""

from __future__ import annotations

from enum import Enum


class _WireEnum(str, Enum):
    """An enum whose value is its snake_case text and whose wire name is PascalCase."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    @property
    def wire(self) -> str:
        """The name used in serialised messages."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def parse(cls, text: str):
        """Look a member up by its snake_case text."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"unknown {cls.__name__}: {text!r}")

    @classmethod
    def from_wire(cls, name: str):
        """Look a member up by its serialised name."""
        for member in cls:
            if member.wire == name:
                return member
        raise ValueError(f"unknown {cls.__name__}: {name!r}")


class Axis(_WireEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    HORIZONTAL_AND_VERTICAL = "horizontal_and_vertical"


class WindowKind(_WireEnum):
    SINGLE = "single"
    STACK = "stack"
    MONOCLE = "monocle"


class StateQuery(_WireEnum):
    FOCUSED_MONITOR_INDEX = "focused_monitor_index"
    FOCUSED_WORKSPACE_INDEX = "focused_workspace_index"
    FOCUSED_CONTAINER_INDEX = "focused_container_index"
    FOCUSED_WINDOW_INDEX = "focused_window_index"


class ApplicationIdentifier(_WireEnum):
    EXE = "exe"
    CLASS = "class"
    TITLE = "title"

    @property
    def wire(self) -> str:
        return self.value


class FocusFollowsMouseImplementation(_WireEnum):
    KOMOREBI = "komorebi"
    WINDOWS = "windows"


class WindowContainerBehaviour(_WireEnum):
    CREATE = "create"
    APPEND = "append"


class MoveBehaviour(_WireEnum):
    SWAP = "swap"
    INSERT = "insert"


class HidingBehaviour(_WireEnum):
    HIDE = "hide"
    MINIMIZE = "minimize"
    CLOAK = "cloak"


class OperationBehaviour(_WireEnum):
    OP = "op"
    NO_OP = "no_op"


class Sizing(_WireEnum):
    INCREASE = "increase"
    DECREASE = "decrease"

    def adjust_by(self, value: int, adjustment: int) -> int:
        """Apply ``adjustment`` to ``value``; a decrease never goes below zero."""
        if self is Sizing.INCREASE:
            return value + adjustment
        if value > 0 and value - adjustment >= 0:
            return value - adjustment
        return value