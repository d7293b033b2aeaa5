from __future__ import annotations

import logging

import pytest

from htmx_fragments import ComponentRegistry, InputField, Select, Skipped, Spacer, Subheader
from htmx_fragments.results import MISSING_NAME, MISSING_OPTIONS


def test_append_keeps_call_order() -> None:
    registry = ComponentRegistry()
    first = registry.append_input(InputField(name="first"))
    registry.append_spacer()
    registry.append_subheader("Details")
    last = registry.append_select(Select(name="last", options={"a": "A"}))

    assert len(registry) == 4
    assert registry.components[0] is first
    assert isinstance(registry.components[1], Spacer)
    assert registry.components[2] == Subheader("Details")
    assert registry.components[3] is last


def test_empty_name_is_skipped_without_raising(caplog: pytest.LogCaptureFixture) -> None:
    registry = ComponentRegistry()
    with caplog.at_level(logging.DEBUG, logger="htmx_fragments.registry"):
        result = registry.append_input(InputField(name=""))

    assert isinstance(result, Skipped)
    assert not result
    assert result.reason == MISSING_NAME
    assert len(registry) == 0
    assert "missing-name" in caplog.text


def test_select_without_options_is_skipped() -> None:
    registry = ComponentRegistry()
    result = registry.add_select("country", options={})
    assert isinstance(result, Skipped)
    assert result.reason == MISSING_OPTIONS
    assert len(registry) == 0


@pytest.mark.parametrize(
    "method, input_type",
    [
        ("add_input_text", "text"),
        ("add_input_email", "email"),
        ("add_input_number", "number"),
        ("add_input_password", "password"),
        ("add_input_tel", "tel"),
        ("add_input_url", "url"),
        ("add_input_search", "search"),
        ("add_input_date", "date"),
        ("add_input_time", "time"),
        ("add_input_datetime_local", "datetime-local"),
        ("add_input_color", "color"),
        ("add_input_range", "range"),
        ("add_checkbox", "checkbox"),
        ("add_radio", "radio"),
        ("add_hidden", "hidden"),
        ("add_input_reset", "reset"),
        ("add_input_button", "button"),
    ],
)
def test_keyword_shortcuts_set_input_type(method: str, input_type: str) -> None:
    registry = ComponentRegistry()
    field = getattr(registry, method)("field", value="v", css_class="c")

    assert isinstance(field, InputField)
    assert field.type == input_type
    assert registry.entries[0].html.startswith(f'<input type="{input_type}" name="field"')


def test_keyword_shortcuts_skip_missing_name() -> None:
    registry = ComponentRegistry()
    assert isinstance(registry.add_input_text(value="orphan"), Skipped)
    assert isinstance(registry.add_textarea(), Skipped)
    assert isinstance(registry.add_button(text="Go"), Skipped)
    assert len(registry) == 0


def test_set_injection_applies_to_later_components_only() -> None:
    registry = ComponentRegistry()
    registry.add_input_text("before")
    registry.set_injection()
    registry.add_input_text("after")

    before, after = registry.entries
    assert "data-injection" not in before.html
    assert after.html.endswith(" data-injection>")
    assert registry.injection_marker == "data-injection"


def test_prepend_places_latest_text_closest_to_components() -> None:
    registry = ComponentRegistry()
    registry.prepend_html("<p>one</p>")
    registry.prepend_html("<p>two</p>")
    registry.append_html("<p>three</p>")
    registry.append_html("<p>four</p>")

    assert registry.prefix == "<p>two</p><p>one</p>"
    assert registry.suffix == "<p>three</p><p>four</p>"


def test_iteration_is_a_snapshot() -> None:
    registry = ComponentRegistry()
    registry.add_hidden("token", value="abc")
    seen = []
    for entry in registry:
        seen.append(entry.component.name)
        registry.add_hidden("extra")
    assert seen == ["token"]
    assert len(registry) == 2
