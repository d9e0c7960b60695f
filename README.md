# tilekit

`tilekit` is the platform-independent core of a tiling window manager. It
calculates where windows go and which window lies in a given direction. It also
builds the JSON messages the window manager accepts on its command socket, and it
generates rule scripts and AutoHotkey wrapper functions for the command-line
client.

## What is in the package

- `tilekit.rect`: `Rect` is a frozen rectangle stored as `left`, `top`, width
  (`right`) and height (`bottom`).
  - `Rect.from_corners` builds one from absolute corners.
  - `add_padding` returns the rect shrunk on every side.
  - `contains_point` tests a point, with the edges counted as inside.
  - `to_data` and `from_data` convert to and from a plain mapping.
- `tilekit.options`: the option enums `Axis`, `WindowKind`, `StateQuery`,
  `ApplicationIdentifier`, `FocusFollowsMouseImplementation`,
  `WindowContainerBehaviour`, `MoveBehaviour`, `HidingBehaviour`,
  `OperationBehaviour` and `Sizing`.
  - Each enum value is its snake_case text, and `parse` looks a member up by that text.
  - The `wire` property gives the serialised name, and `from_wire` looks a member up by it.
  - `Sizing.adjust_by` never decreases a value below zero.
- `tilekit.cycle_direction`: `CycleDirection.next_idx` steps to the previous or
  next index and wraps around at either end.
- `tilekit.operation_direction`: `OperationDirection` has the methods
  `opposite`, `flip` (which respects a layout flip along an `Axis`) and
  `destination`.
- `tilekit.arrangement`: the building blocks `columns`, `rows`,
  `calculate_resize_adjustments` and `recursive_fibonacci` (the BSP split).
- `tilekit.default_layout`: `DefaultLayout` has the members `BSP`, `COLUMNS`,
  `ROWS`, `VERTICAL_STACK`, `HORIZONTAL_STACK` and `ULTRAWIDE_VERTICAL_STACK`.
  - `calculate` returns the window rectangles.
  - `resize` adjusts an edge and works for BSP only.
  - `index_in_direction`, `is_valid_direction` and the `up_index`, `down_index`,
    `left_index` and `right_index` methods handle navigation.
- `tilekit.custom_layout`: `CustomLayout` is a list of `Column` values. Each
  column is of kind primary, secondary or tertiary (`ColumnKind`). A column may
  have a `ColumnSplit`, or a `ColumnSplitWithCapacity` that also fixes how many
  containers it holds.
  - `from_path` loads a layout from a `.json`, `.yaml` or `.yml` file and
    rejects it unless `is_valid` holds.
  - `calculate` arranges containers, and the same navigation methods as
    `DefaultLayout` are available.
- `tilekit.layout`: `layout_to_data` and `layout_from_data` read and write a
  layout tagged as `{"Default": ...}` or `{"Custom": [...]}`.
- `tilekit.messages`: `SocketMessage` pairs a `MessageType` with typed
  arguments.
  - The arguments are checked when the message is created.
  - The message converts with `to_data` / `from_data`, `to_json` / `from_json`
    and `as_bytes`, using the tagged form `{"type": ..., "content": ...}`.
- `tilekit.config_generation`: reads a YAML list of application
  configurations into `ApplicationConfiguration` objects.
  - `load_configurations` parses the list.
  - `merge_configurations` replaces same-named entries with the overrides and
    appends new ones.
  - `format_configurations` sorts the list by name and writes it back as YAML.
  - `generate_pwsh` and `generate_ahk` produce script lines. Each float rule
    appears only once.
- `tilekit.ahk`: `AhkFunction(name, arguments, flags).generate()` writes one
  AutoHotkey wrapper function. `ahk_library` joins such functions under a
  header; a plain string entry stands for a command without arguments.
  `to_kebab_case` gives the command name.

Invalid input raises `ValueError`: a length below 1, a malformed message, an
unknown enum name, or a layout file that is not JSON or YAML.

## Installation

```
pip install tilekit
```

## Usage

### Arranging windows

```python
from tilekit.rect import Rect
from tilekit.default_layout import DefaultLayout
from tilekit.options import Axis

area = Rect(left=0, top=0, right=1920, bottom=1080)
rects = DefaultLayout.BSP.calculate(area, 3, 10, None, [])
flipped = DefaultLayout.VERTICAL_STACK.calculate(area, 4, None, Axis.HORIZONTAL, [])
```

### Moving focus

```python
from tilekit.default_layout import DefaultLayout
from tilekit.operation_direction import OperationDirection
from tilekit.cycle_direction import CycleDirection

target = OperationDirection.RIGHT.destination(DefaultLayout.COLUMNS, None, 0, 3)  # 1
following = CycleDirection.NEXT.next_idx(2, 3)  # wraps to 0
```

### Custom layouts

```python
from tilekit.custom_layout import CustomLayout
from tilekit.rect import Rect

layout = CustomLayout.from_path("layout.yaml")
rects = layout.calculate(Rect(0, 0, 1920, 1080), 5, None, None, [])
```

### Socket messages

```python
from tilekit.messages import MessageType, SocketMessage
from tilekit.operation_direction import OperationDirection

message = SocketMessage(MessageType.FOCUS_WINDOW, (OperationDirection.LEFT,))
payload = message.as_bytes()  # b'{"type":"FocusWindow","content":"Left"}'
same = SocketMessage.from_json(payload.decode())
```

### Generating configuration

```python
from tilekit.config_generation import generate_ahk, generate_pwsh

with open("applications.yaml") as handle:
    base = handle.read()

print("\n".join(generate_pwsh(base, None)))
print("\n".join(generate_ahk(base, None)))
```

### AutoHotkey wrappers

```python
from tilekit.ahk import AhkFunction, ahk_library

library = ahk_library([
    AhkFunction("FocusWindow", ("operation_direction",)),
    "Retile",
])
```

## What the package does not do

This is a library, not a running window manager. It does not move, hide or
focus windows, and it does not listen on a socket or send messages over one. It
has no command-line program, and it starts no other programs. It only calculates
layouts and produces the text: messages, YAML and script lines.

## Running the tests

```
pip install -e ".[test]"
pytest
```