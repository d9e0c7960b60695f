"""Generating rule scripts from a YAML list of application configurations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import yaml

from tilekit.options import ApplicationIdentifier, _WireEnum

_TRAY_NOTE = (
    "If you have disabled minimize/close to tray for this application, "
    "you can delete/comment out the next line"
)


class ApplicationOptions(_WireEnum):
    OBJECT_NAME_CHANGE = "object_name_change"
    LAYERED = "layered"
    BORDER_OVERFLOW = "border_overflow"
    TRAY_AND_MULTI_WINDOW = "tray_and_multi_window"
    FORCE = "force"

    @property
    def wire(self) -> str:
        return self.value

    def raw_cfgen(self, kind: ApplicationIdentifier, id_: str) -> str:
        """The command line that applies this option to an application."""
        command = _COMMANDS[self]
        return f'komorebic.exe {command} {kind} "{id_}"'

    def cfgen(self, kind: ApplicationIdentifier, id_: str) -> str:
        """The AutoHotkey statement that applies this option to an application."""
        return f"RunWait('{self.raw_cfgen(kind, id_)}', , \"Hide\")"


_COMMANDS = {
    ApplicationOptions.OBJECT_NAME_CHANGE: "identify-object-name-change-application",
    ApplicationOptions.LAYERED: "identify-layered-application",
    ApplicationOptions.BORDER_OVERFLOW: "identify-border-overflow-application",
    ApplicationOptions.TRAY_AND_MULTI_WINDOW: "identify-tray-application",
    ApplicationOptions.FORCE: "manage-rule",
}


def _field(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    if key not in data:
        raise ValueError(f"{what} is missing the field {key!r}")
    return data[key]


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string")
    return value


def _identifier(value: Any) -> ApplicationIdentifier:
    if not isinstance(value, str):
        raise ValueError("an identifier kind must be a string")
    return ApplicationIdentifier.from_wire(value)


def _list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return value


@dataclass(frozen=True)
class IdWithIdentifier:
    kind: ApplicationIdentifier
    id: str

    @classmethod
    def _from_data(cls, data: Any) -> IdWithIdentifier:
        what = "an identifier"
        return cls(
            kind=_identifier(_field(data, "kind", what)),
            id=_string(_field(data, "id", what), "an identifier id"),
        )

    def _to_data(self) -> dict[str, Any]:
        return {"kind": self.kind.wire, "id": self.id}


@dataclass(frozen=True)
class IdWithIdentifierAndComment:
    kind: ApplicationIdentifier
    id: str
    comment: str | None = None

    @classmethod
    def _from_data(cls, data: Any) -> IdWithIdentifierAndComment:
        what = "a float identifier"
        comment = data.get("comment") if isinstance(data, Mapping) else None
        if comment is not None:
            comment = _string(comment, "a comment")
        return cls(
            kind=_identifier(_field(data, "kind", what)),
            id=_string(_field(data, "id", what), "a float identifier id"),
            comment=comment,
        )

    def _to_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.wire, "id": self.id}
        if self.comment is not None:
            data["comment"] = self.comment
        return data


@dataclass(frozen=True)
class ApplicationConfiguration:
    """The rules that apply to one application."""

    name: str
    identifier: IdWithIdentifier
    options: tuple[ApplicationOptions, ...] | None = None
    float_identifiers: tuple[IdWithIdentifierAndComment, ...] | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> ApplicationConfiguration:
        """Build a configuration from its mapping form."""
        what = "an application configuration"
        name = _string(_field(data, "name", what), "an application name")
        identifier = IdWithIdentifier._from_data(_field(data, "identifier", what))

        options = data.get("options")
        if options is not None:
            options = tuple(
                ApplicationOptions.from_wire(_string(option, "an option"))
                for option in _list(options, "options")
            )

        floats = data.get("float_identifiers")
        if floats is not None:
            floats = tuple(
                IdWithIdentifierAndComment._from_data(item)
                for item in _list(floats, "float_identifiers")
            )

        return cls(name=name, identifier=identifier, options=options, float_identifiers=floats)

    def to_data(self) -> dict[str, Any]:
        """Mapping form; absent options and float identifiers are left out."""
        data: dict[str, Any] = {"name": self.name, "identifier": self.identifier._to_data()}
        if self.options is not None:
            data["options"] = [option.wire for option in self.options]
        if self.float_identifiers is not None:
            data["float_identifiers"] = [item._to_data() for item in self.float_identifiers]
        return data


def load_configurations(content: str) -> list[ApplicationConfiguration]:
    """Parse a YAML list of application configurations."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as error:
        raise ValueError(f"invalid yaml: {error}") from error
    if not isinstance(data, list):
        raise ValueError("expected a list of application configurations")
    return [ApplicationConfiguration.from_data(item) for item in data]


def merge_configurations(
    base_content: str, override_content: str
) -> list[ApplicationConfiguration]:
    """Base configurations with same-named entries replaced and new ones appended."""
    base = load_configurations(base_content)
    overrides = load_configurations(override_content)
    merged = list(base)

    for entry in overrides:
        replace_idx = None
        for idx, base_entry in enumerate(base):
            if base_entry.name == entry.name:
                replace_idx = idx
        if replace_idx is None:
            merged.append(entry)
        else:
            merged[replace_idx] = entry

    return merged


def format_configurations(content: str) -> str:
    """The configurations sorted by name and written back out as YAML."""
    configurations = sorted(load_configurations(content), key=lambda c: c.name)
    return yaml.safe_dump(
        [c.to_data() for c in configurations],
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def _generate(
    base_content: str,
    override_content: str | None,
    comment: str,
    option_line: Callable[[ApplicationOptions, ApplicationIdentifier, str], str],
    float_line: Callable[[IdWithIdentifierAndComment], str],
) -> list[str]:
    if override_content is not None:
        configurations = merge_configurations(base_content, override_content)
    else:
        configurations = load_configurations(base_content)
    configurations.sort(key=lambda c: c.name)

    lines = [f"{comment} Generated by komorebic.exe", ""]
    seen_float_rules: set[str] = set()

    for app in configurations:
        lines.append(f"{comment} {app.name}")
        for option in app.options or ():
            if option is ApplicationOptions.TRAY_AND_MULTI_WINDOW:
                lines.append(f"{comment} {_TRAY_NOTE}")
            lines.append(option_line(option, app.identifier.kind, app.identifier.id))

        for item in app.float_identifiers or ():
            rule = float_line(item)
            # Each float rule is only emitted once across the whole script.
            if rule in seen_float_rules:
                continue
            seen_float_rules.add(rule)
            if item.comment is not None:
                lines.append(f"{comment} {item.comment}")
            lines.append(rule)

        lines.append("")

    return lines


def generate_pwsh(base_content: str, override_content: str | None = None) -> list[str]:
    """Lines of a PowerShell script applying every configured rule."""
    return _generate(
        base_content,
        override_content,
        "#",
        ApplicationOptions.raw_cfgen,
        lambda item: f'komorebic.exe float-rule {item.kind} "{item.id}"',
    )


def generate_ahk(base_content: str, override_content: str | None = None) -> list[str]:
    """Lines of an AutoHotkey script applying every configured rule."""
    return _generate(
        base_content,
        override_content,
        ";",
        ApplicationOptions.cfgen,
        lambda item: (
            f"RunWait('komorebic.exe float-rule {item.kind} \"{item.id}\"', , \"Hide\")"
        ),
    )