"""Component records and their per-type render rules.

Each record describes one form control. ``render`` returns the control's
markup with every user supplied value escaped; the optional ``marker`` is the
injection placeholder appended as the last attribute of the control.
``skip_reason`` reports why a record cannot be appended, or ``None``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from .constants import BUTTON_TYPES, INPUT_TYPES
from .markup import Tag, escape_html
from .results import MISSING_NAME, MISSING_OPTIONS, UNKNOWN_BUTTON_TYPE, UNKNOWN_INPUT_TYPE


@dataclass(frozen=True, slots=True)
class InputField:
    """An ``<input>`` control of one of :data:`INPUT_TYPES`."""

    name: str
    type: str = "text"
    id: str = ""
    value: str = ""
    css_class: str = ""
    placeholder: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    column_before: str | None = None
    column_after: str | None = None

    def skip_reason(self) -> str | None:
        if not self.name:
            return MISSING_NAME
        if self.type not in INPUT_TYPES:
            return UNKNOWN_INPUT_TYPE
        return None

    def render(self, marker: str = "") -> str:
        return (
            Tag("input")
            .attr("type", self.type)
            .attr("name", self.name)
            .optional("id", self.id)
            .attr("value", self.value)
            .attr("class", self.css_class)
            .optional("placeholder", self.placeholder)
            .extend(self.attributes)
            .raw(marker)
            .render()
        )


@dataclass(frozen=True, slots=True)
class TextArea:
    """A ``<textarea>``; ``value`` becomes the escaped element content."""

    name: str
    id: str = ""
    value: str = ""
    css_class: str = ""
    placeholder: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    column_before: str | None = None
    column_after: str | None = None

    def skip_reason(self) -> str | None:
        return None if self.name else MISSING_NAME

    def render(self, marker: str = "") -> str:
        return (
            Tag("textarea", content=escape_html(self.value))
            .attr("name", self.name)
            .optional("id", self.id)
            .attr("class", self.css_class)
            .optional("placeholder", self.placeholder)
            .extend(self.attributes)
            .raw(marker)
            .render()
        )


@dataclass(frozen=True, slots=True)
class Select:
    """A ``<select>`` with options rendered in insertion order.

    ``placeholder`` adds a leading ``<option value="">`` when it is not
    ``None`` (an empty string still produces the blank option). The option
    whose key equals ``selected`` as a string carries the ``selected`` flag.
    """

    name: str
    options: Mapping[object, object] = field(default_factory=dict)
    id: str = ""
    css_class: str = ""
    selected: str = ""
    placeholder: str | None = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    column_before: str | None = None
    column_after: str | None = None

    def skip_reason(self) -> str | None:
        if not self.name:
            return MISSING_NAME
        if not self.options:
            return MISSING_OPTIONS
        return None

    def render(self, marker: str = "") -> str:
        selected = str(self.selected) if self.selected is not None else ""
        parts: list[str] = []
        if self.placeholder is not None:
            parts.append('<option value="">' + escape_html(self.placeholder) + "</option>")
        for key, label in self.options.items():
            option_value = str(key)
            parts.append(
                Tag("option", content=escape_html(label))
                .attr("value", option_value)
                .flag("selected", option_value == selected)
                .render()
            )
        return (
            Tag("select", content="".join(parts))
            .attr("name", self.name)
            .optional("id", self.id)
            .attr("class", self.css_class)
            .extend(self.attributes)
            .raw(marker)
            .render()
        )


@dataclass(frozen=True, slots=True)
class Button:
    name: str
    text: str = ""
    button_type: str = "button"
    id: str = ""
    css_class: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    column_before: str | None = None
    column_after: str | None = None

    def skip_reason(self) -> str | None:
        if not self.name:
            return MISSING_NAME
        if self.button_type not in BUTTON_TYPES:
            return UNKNOWN_BUTTON_TYPE
        return None

    def render(self, marker: str = "") -> str:
        return (
            Tag("button", content=escape_html(self.text))
            .attr("type", self.button_type)
            .attr("name", self.name)
            .optional("id", self.id)
            .attr("class", self.css_class)
            .extend(self.attributes)
            .raw(marker)
            .render()
        )


@dataclass(frozen=True, slots=True)
class Spacer:
    """An empty full-width row in table layouts; no markup elsewhere."""

    def skip_reason(self) -> str | None:
        return None

    def render(self, marker: str = "") -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Subheader:
    """A bold full-width label row in table layouts; no markup elsewhere."""

    label: str = ""

    def skip_reason(self) -> str | None:
        return None

    def render(self, marker: str = "") -> str:
        return ""


Component = Union[InputField, TextArea, Select, Button, Spacer, Subheader]
FieldComponent = Union[InputField, TextArea, Select, Button]


def describe(component: Component) -> str:
    """Short identifier used in log messages."""

    name = getattr(component, "name", "")
    kind = type(component).__name__
    return f"{kind}({name!r})" if name else kind


__all__ = [
    "Button",
    "Component",
    "FieldComponent",
    "InputField",
    "Select",
    "Spacer",
    "Subheader",
    "TextArea",
    "describe",
]
