"""AutoHotkey wrapper functions for each command-line command."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_HEADER = "; Generated by komorebic.exe"
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+|[0-9]+")


def to_kebab_case(name: str) -> str:
    """Lower-case words of ``name`` joined by hyphens."""
    return "-".join(word.lower() for word in _WORD.findall(name))


def _identifier(value: str, what: str) -> str:
    if not isinstance(value, str) or not value.isidentifier():
        raise ValueError(f"{what} must be an identifier, got {value!r}")
    return value


def _placeholders(names: Iterable[str]) -> str:
    return " ".join(f"%{name}%" for name in names)


@dataclass(frozen=True)
class AhkFunction:
    """A command with its positional arguments and its ``--long`` flag arguments."""

    name: str
    arguments: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _identifier(self.name, "a command name")
        object.__setattr__(
            self, "arguments", tuple(_identifier(a, "an argument") for a in self.arguments)
        )
        object.__setattr__(
            self, "flags", tuple(_identifier(f, "a flag") for f in self.flags)
        )

    def generate(self) -> str:
        """The AutoHotkey function that runs this command."""
        command = to_kebab_case(self.name)
        called_arguments = _placeholders(self.arguments)
        parameters = ", ".join(self.arguments + self.flags)

        if self.flags:
            all_flags = " ".join(
                f"--{flag.replace('_', '-')} %{flag}%" for flag in self.flags
            )
            body = f"RunWait, komorebic.exe {command} {called_arguments} {all_flags}, , Hide"
        else:
            body = f"RunWait, komorebic.exe {command} {called_arguments}, , Hide"

        return f"\n{self.name}({parameters}) {{\n    {body}\n}}"


def _unit_function(name: str) -> str:
    _identifier(name, "a command name")
    return (
        f"\n{name}() {{\n    RunWait, komorebic.exe {to_kebab_case(name)}, , Hide\n}}"
    )


def ahk_library(entries: Iterable[AhkFunction | str]) -> str:
    """A whole AutoHotkey library; a plain string entry is a command without arguments."""
    parts = [_HEADER]
    for entry in entries:
        if isinstance(entry, AhkFunction):
            parts.append(entry.generate())
        elif isinstance(entry, str):
            parts.append(_unit_function(entry))
        else:
            raise TypeError(f"not a command: {entry!r}")
    return "\n".join(parts)