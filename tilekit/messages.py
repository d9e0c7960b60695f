"""Messages sent to the window manager over its command socket."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from tilekit.cycle_direction import CycleDirection
from tilekit.default_layout import DefaultLayout
from tilekit.operation_direction import OperationDirection
from tilekit.options import (
    ApplicationIdentifier,
    Axis,
    FocusFollowsMouseImplementation,
    HidingBehaviour,
    MoveBehaviour,
    OperationBehaviour,
    Sizing,
    StateQuery,
    WindowKind,
    _WireEnum,
)
from tilekit.rect import Rect


@dataclass(frozen=True)
class _Int:
    low: int
    high: int | None


_USIZE = _Int(0, None)
_U32 = _Int(0, 2**32 - 1)
_I32 = _Int(-(2**31), 2**31 - 1)
_STRINGS = object()

_OD = OperationDirection
_CD = CycleDirection
_AI = ApplicationIdentifier
_DL = DefaultLayout

_SIGNATURES: dict[str, tuple[Any, ...]] = {
    "FocusWindow": (_OD,),
    "MoveWindow": (_OD,),
    "CycleFocusWindow": (_CD,),
    "CycleMoveWindow": (_CD,),
    "StackWindow": (_OD,),
    "ResizeWindowEdge": (_OD, Sizing),
    "ResizeWindowAxis": (Axis, Sizing),
    "UnstackWindow": (),
    "CycleStack": (_CD,),
    "MoveContainerToMonitorNumber": (_USIZE,),
    "CycleMoveContainerToMonitor": (_CD,),
    "MoveContainerToWorkspaceNumber": (_USIZE,),
    "MoveContainerToNamedWorkspace": (str,),
    "CycleMoveContainerToWorkspace": (_CD,),
    "SendContainerToMonitorNumber": (_USIZE,),
    "CycleSendContainerToMonitor": (_CD,),
    "SendContainerToWorkspaceNumber": (_USIZE,),
    "CycleSendContainerToWorkspace": (_CD,),
    "SendContainerToMonitorWorkspaceNumber": (_USIZE, _USIZE),
    "SendContainerToNamedWorkspace": (str,),
    "MoveWorkspaceToMonitorNumber": (_USIZE,),
    "ForceFocus": (),
    "Close": (),
    "Minimize": (),
    "Promote": (),
    "PromoteFocus": (),
    "ToggleFloat": (),
    "ToggleMonocle": (),
    "ToggleMaximize": (),
    "ToggleWindowContainerBehaviour": (),
    "WindowHidingBehaviour": (HidingBehaviour,),
    "ToggleCrossMonitorMoveBehaviour": (),
    "CrossMonitorMoveBehaviour": (MoveBehaviour,),
    "UnmanagedWindowOperationBehaviour": (OperationBehaviour,),
    "ManageFocusedWindow": (),
    "UnmanageFocusedWindow": (),
    "AdjustContainerPadding": (Sizing, _I32),
    "AdjustWorkspacePadding": (Sizing, _I32),
    "ChangeLayout": (_DL,),
    "ChangeLayoutCustom": (Path,),
    "FlipLayout": (Axis,),
    "MonitorIndexPreference": (_USIZE, _I32, _I32, _I32, _I32),
    "EnsureWorkspaces": (_USIZE, _USIZE),
    "EnsureNamedWorkspaces": (_USIZE, _STRINGS),
    "NewWorkspace": (),
    "ToggleTiling": (),
    "Stop": (),
    "TogglePause": (),
    "Retile": (),
    "QuickSave": (),
    "QuickLoad": (),
    "Save": (Path,),
    "Load": (Path,),
    "CycleFocusMonitor": (_CD,),
    "CycleFocusWorkspace": (_CD,),
    "FocusMonitorNumber": (_USIZE,),
    "FocusWorkspaceNumber": (_USIZE,),
    "FocusWorkspaceNumbers": (_USIZE,),
    "FocusMonitorWorkspaceNumber": (_USIZE, _USIZE),
    "FocusNamedWorkspace": (str,),
    "ContainerPadding": (_USIZE, _USIZE, _I32),
    "NamedWorkspaceContainerPadding": (str, _I32),
    "WorkspacePadding": (_USIZE, _USIZE, _I32),
    "NamedWorkspacePadding": (str, _I32),
    "WorkspaceTiling": (_USIZE, _USIZE, bool),
    "NamedWorkspaceTiling": (str, bool),
    "WorkspaceName": (_USIZE, _USIZE, str),
    "WorkspaceLayout": (_USIZE, _USIZE, _DL),
    "NamedWorkspaceLayout": (str, _DL),
    "WorkspaceLayoutCustom": (_USIZE, _USIZE, Path),
    "NamedWorkspaceLayoutCustom": (str, Path),
    "WorkspaceLayoutRule": (_USIZE, _USIZE, _USIZE, _DL),
    "NamedWorkspaceLayoutRule": (str, _USIZE, _DL),
    "WorkspaceLayoutCustomRule": (_USIZE, _USIZE, _USIZE, Path),
    "NamedWorkspaceLayoutCustomRule": (str, _USIZE, Path),
    "ClearWorkspaceLayoutRules": (_USIZE, _USIZE),
    "ClearNamedWorkspaceLayoutRules": (str,),
    "ReloadConfiguration": (),
    "WatchConfiguration": (bool,),
    "CompleteConfiguration": (),
    "AltFocusHack": (bool,),
    "ActiveWindowBorder": (bool,),
    "ActiveWindowBorderColour": (WindowKind, _U32, _U32, _U32),
    "ActiveWindowBorderWidth": (_I32,),
    "ActiveWindowBorderOffset": (_I32,),
    "InvisibleBorders": (Rect,),
    "WorkAreaOffset": (Rect,),
    "MonitorWorkAreaOffset": (_USIZE, Rect),
    "ResizeDelta": (_I32,),
    "InitialWorkspaceRule": (_AI, str, _USIZE, _USIZE),
    "InitialNamedWorkspaceRule": (_AI, str, str),
    "WorkspaceRule": (_AI, str, _USIZE, _USIZE),
    "NamedWorkspaceRule": (_AI, str, str),
    "FloatRule": (_AI, str),
    "ManageRule": (_AI, str),
    "IdentifyObjectNameChangeApplication": (_AI, str),
    "IdentifyTrayApplication": (_AI, str),
    "IdentifyLayeredApplication": (_AI, str),
    "IdentifyBorderOverflowApplication": (_AI, str),
    "State": (),
    "Query": (StateQuery,),
    "FocusFollowsMouse": (FocusFollowsMouseImplementation, bool),
    "ToggleFocusFollowsMouse": (FocusFollowsMouseImplementation,),
    "MouseFollowsFocus": (bool,),
    "ToggleMouseFollowsFocus": (),
    "RemoveTitleBar": (_AI, str),
    "ToggleTitleBars": (),
    "AddSubscriber": (str,),
    "RemoveSubscriber": (str,),
    "NotificationSchema": (),
    "SocketSchema": (),
}


def _constant(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()


MessageType = Enum(  # type: ignore[misc]
    "MessageType",
    [(_constant(name), name) for name in _SIGNATURES],
    module=__name__,
)
MessageType.__doc__ = "The kinds of message the window manager understands."


def _check(kind: Any, value: Any) -> Any:
    """Validate ``value`` against ``kind`` and return its normal form."""
    if isinstance(kind, _Int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected an integer, got {value!r}")
        if value < kind.low or (kind.high is not None and value > kind.high):
            raise ValueError(f"integer {value} is out of range")
        return value
    if kind is _STRINGS:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise ValueError("expected a list of strings")
        items = tuple(value)
        if not all(isinstance(item, str) for item in items):
            raise ValueError("expected a list of strings")
        return items
    if kind is Path:
        if not isinstance(value, (str, os.PathLike)):
            raise ValueError(f"expected a path, got {value!r}")
        return Path(value)
    if kind is bool or kind is str or kind is Rect:
        if not isinstance(value, kind):
            raise ValueError(f"expected {kind.__name__}, got {value!r}")
        return value
    if not isinstance(value, kind):
        raise ValueError(f"expected {kind.__name__}, got {value!r}")
    return value


def _encode(kind: Any, value: Any) -> Any:
    if kind is _STRINGS:
        return list(value)
    if kind is Path:
        return str(value)
    if kind is Rect:
        return value.to_data()
    if isinstance(kind, type) and issubclass(kind, _WireEnum):
        return value.wire
    return value


def _decode(kind: Any, raw: Any) -> Any:
    if kind is Path:
        if not isinstance(raw, str):
            raise ValueError(f"expected a path string, got {raw!r}")
        return Path(raw)
    if kind is Rect:
        return Rect.from_data(raw)
    if isinstance(kind, type) and issubclass(kind, _WireEnum):
        if not isinstance(raw, str):
            raise ValueError(f"expected a {kind.__name__} name, got {raw!r}")
        return kind.from_wire(raw)
    return _check(kind, raw)


@dataclass(frozen=True)
class SocketMessage:
    """A command for the window manager together with its arguments."""

    type: MessageType
    args: tuple = ()

    def __post_init__(self) -> None:
        if not isinstance(self.type, MessageType):
            raise ValueError(f"not a message type: {self.type!r}")
        signature = _SIGNATURES[self.type.value]
        args = tuple(self.args)
        if len(args) != len(signature):
            raise ValueError(
                f"{self.type.value} takes {len(signature)} argument(s), got {len(args)}"
            )
        object.__setattr__(
            self, "args", tuple(_check(kind, arg) for kind, arg in zip(signature, args))
        )

    def __str__(self) -> str:
        return self.type.value

    def to_data(self) -> dict[str, Any]:
        """Mapping form with ``type`` and, when there are arguments, ``content``."""
        signature = _SIGNATURES[self.type.value]
        data: dict[str, Any] = {"type": self.type.value}
        encoded = [_encode(kind, arg) for kind, arg in zip(signature, self.args)]
        if len(encoded) == 1:
            data["content"] = encoded[0]
        elif encoded:
            data["content"] = encoded
        return data

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> SocketMessage:
        """Build a message from its mapping form."""
        if not isinstance(data, Mapping) or "type" not in data:
            raise ValueError("a message must be a mapping with a 'type' field")
        name = data["type"]
        if not isinstance(name, str) or name not in _SIGNATURES:
            raise ValueError(f"unknown message type: {name!r}")
        signature = _SIGNATURES[name]
        content = data.get("content")

        if not signature:
            if content is not None:
                raise ValueError(f"{name} takes no content")
            return cls(MessageType(name))
        if "content" not in data:
            raise ValueError(f"{name} is missing its content")
        if len(signature) == 1:
            raw_args = [content]
        else:
            if not isinstance(content, list) or len(content) != len(signature):
                raise ValueError(f"{name} expects a list of {len(signature)} values")
            raw_args = content
        return cls(
            MessageType(name),
            tuple(_decode(kind, raw) for kind, raw in zip(signature, raw_args)),
        )

    def to_json(self) -> str:
        """Compact JSON text of this message."""
        return json.dumps(self.to_data(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> SocketMessage:
        """Parse a message from JSON text."""
        return cls.from_data(json.loads(text))

    def as_bytes(self) -> bytes:
        """The JSON text of this message encoded as UTF-8."""
        return self.to_json().encode("utf-8")