"""Ordered, append-only collection of form components."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from .components import (
    Button,
    Component,
    InputField,
    Select,
    Spacer,
    Subheader,
    TextArea,
    describe,
)
from .constants import INJECTION_MARKER
from .results import Skipped

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderedComponent:
    """A component together with the markup produced when it was appended."""

    component: Component
    html: str


class ComponentRegistry:
    """Collect components in display order for one of the renderers.

    Appends that lack required data are discarded and reported through the
    returned :class:`~htmx_fragments.results.Skipped` record; nothing is
    raised. Markup is rendered at append time, so :meth:`set_injection`
    affects the components appended after it and the form element.
    """

    def __init__(self, *, injection: bool = False) -> None:
        self._entries: list[RenderedComponent] = []
        self._prefix = ""
        self._suffix = ""
        self._marker = INJECTION_MARKER if injection else ""

    def set_injection(self) -> None:
        """Emit the injection placeholder on subsequently rendered controls."""

        self._marker = INJECTION_MARKER

    @property
    def injection_marker(self) -> str:
        return self._marker

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def suffix(self) -> str:
        return self._suffix

    @property
    def entries(self) -> tuple[RenderedComponent, ...]:
        return tuple(self._entries)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(entry.component for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RenderedComponent]:
        return iter(tuple(self._entries))

    def append_input(self, field: InputField) -> InputField | Skipped:
        return self._append(field)

    def append_textarea(self, field: TextArea) -> TextArea | Skipped:
        return self._append(field)

    def append_select(self, field: Select) -> Select | Skipped:
        return self._append(field)

    def append_button(self, field: Button) -> Button | Skipped:
        return self._append(field)

    def append_spacer(self) -> Spacer:
        spacer = Spacer()
        self._append(spacer)
        return spacer

    def append_subheader(self, label: str) -> Subheader:
        subheader = Subheader(label=label)
        self._append(subheader)
        return subheader

    def prepend_html(self, html: str) -> None:
        """Add raw ``html`` in front of everything prepended so far."""

        self._prefix = html + self._prefix

    def append_html(self, html: str) -> None:
        self._suffix += html

    # Keyword shortcuts, one per input type.

    def add_input_text(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("text", name, options)

    def add_input_email(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("email", name, options)

    def add_input_number(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("number", name, options)

    def add_input_password(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("password", name, options)

    def add_input_tel(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("tel", name, options)

    def add_input_url(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("url", name, options)

    def add_input_search(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("search", name, options)

    def add_input_date(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("date", name, options)

    def add_input_time(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("time", name, options)

    def add_input_datetime_local(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("datetime-local", name, options)

    def add_input_color(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("color", name, options)

    def add_input_range(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("range", name, options)

    def add_checkbox(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("checkbox", name, options)

    def add_radio(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("radio", name, options)

    def add_hidden(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("hidden", name, options)

    def add_input_reset(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("reset", name, options)

    def add_input_button(self, name: str = "", **options: Any) -> InputField | Skipped:
        return self._add_input("button", name, options)

    def add_textarea(self, name: str = "", **options: Any) -> TextArea | Skipped:
        return self._append(TextArea(name=name, **options))

    def add_select(self, name: str = "", **options: Any) -> Select | Skipped:
        return self._append(Select(name=name, **options))

    def add_button(self, name: str = "", **options: Any) -> Button | Skipped:
        return self._append(Button(name=name, **options))

    def _add_input(self, input_type: str, name: str, options: dict[str, Any]) -> InputField | Skipped:
        return self._append(InputField(name=name, type=input_type, **options))

    def _append(self, component: Component) -> Any:
        reason = component.skip_reason()
        if reason is not None:
            logger.debug("Skipping %s: %s", describe(component), reason)
            return Skipped(reason, detail=describe(component))
        self._entries.append(RenderedComponent(component, component.render(self._marker)))
        return component


__all__ = ["ComponentRegistry", "RenderedComponent"]
