from __future__ import annotations

import pytest

from htmx_fragments.components import Button, InputField, Select, Spacer, Subheader, TextArea
from htmx_fragments.results import MISSING_NAME, MISSING_OPTIONS, UNKNOWN_BUTTON_TYPE, UNKNOWN_INPUT_TYPE


def test_input_field_renders_attributes_in_order() -> None:
    field = InputField(
        name="user",
        id="user-name",
        value="Ada",
        css_class="form-control",
        placeholder="Enter username",
        attributes={"autocomplete": "off", "data-role": "primary"},
    )
    assert field.render() == (
        '<input type="text" name="user" id="user-name" value="Ada" class="form-control" '
        'placeholder="Enter username" autocomplete="off" data-role="primary">'
    )


def test_input_field_omits_empty_id_and_placeholder_but_keeps_value_and_class() -> None:
    assert InputField(name="q", type="search").render() == '<input type="search" name="q" value="" class="">'


def test_input_field_appends_marker_last() -> None:
    rendered = InputField(name="q", attributes={"data-x": "1"}).render("data-injection")
    assert rendered == '<input type="text" name="q" value="" class="" data-x="1" data-injection>'


def test_input_field_escapes_user_values() -> None:
    rendered = InputField(name='a"b', value="<x>&", attributes={'k"': "v'"}).render()
    assert 'name="a&quot;b"' in rendered
    assert 'value="&lt;x&gt;&amp;"' in rendered
    assert 'k&quot;="v&#x27;"' in rendered


def test_textarea_places_value_as_content() -> None:
    area = TextArea(name="bio", id="bio", value="<b>hi</b>", placeholder="About you")
    assert area.render("data-injection") == (
        '<textarea name="bio" id="bio" class="" placeholder="About you" data-injection>'
        "&lt;b&gt;hi&lt;/b&gt;</textarea>"
    )


def test_select_marks_only_the_selected_option() -> None:
    select = Select(
        name="country",
        options={"us": "United States", "ca": "Canada"},
        selected="ca",
        placeholder="Pick one",
    )
    assert select.render() == (
        '<select name="country" class="">'
        '<option value="">Pick one</option>'
        '<option value="us">United States</option>'
        '<option value="ca" selected>Canada</option>'
        "</select>"
    )


def test_select_compares_keys_as_strings() -> None:
    rendered = Select(name="n", options={1: "One", 2: "Two"}, selected="2").render()
    assert '<option value="2" selected>Two</option>' in rendered
    assert '<option value="1">One</option>' in rendered


def test_select_without_placeholder_has_no_blank_option() -> None:
    rendered = Select(name="n", options={"a": "A"}).render()
    assert 'value=""' not in rendered


def test_select_escapes_labels_and_keys() -> None:
    rendered = Select(name="n", options={'"k"': "<A & B>"}).render()
    assert '<option value="&quot;k&quot;">&lt;A &amp; B&gt;</option>' in rendered


def test_button_renders_type_and_text() -> None:
    button = Button(name="go", text="Go & run", button_type="submit", id="go", css_class="btn")
    assert button.render() == '<button type="submit" name="go" id="go" class="btn">Go &amp; run</button>'
    assert Button(name="b").render().startswith('<button type="button" name="b"')


@pytest.mark.parametrize(
    "component, reason",
    [
        (InputField(name=""), MISSING_NAME),
        (InputField(name="x", type="file"), UNKNOWN_INPUT_TYPE),
        (TextArea(name=""), MISSING_NAME),
        (Select(name="", options={"a": "A"}), MISSING_NAME),
        (Select(name="s"), MISSING_OPTIONS),
        (Button(name=""), MISSING_NAME),
        (Button(name="b", button_type="image"), UNKNOWN_BUTTON_TYPE),
    ],
)
def test_skip_reason_reports_missing_data(component: object, reason: str) -> None:
    assert component.skip_reason() == reason  # type: ignore[attr-defined]


def test_structural_components_have_no_flat_markup() -> None:
    assert Spacer().render() == ""
    assert Subheader("Billing").render("data-injection") == ""
    assert Spacer().skip_reason() is None


def test_select_and_button_append_marker_after_extra_attributes() -> None:
    select = Select(name="s", options={"a": "A"}, attributes={"hx-trigger": "change"})
    assert select.render("data-injection") == (
        '<select name="s" class="" hx-trigger="change" data-injection>'
        '<option value="a">A</option>'
        "</select>"
    )

    button = Button(name="b", text="Go", attributes={"hx-confirm": "Sure?"})
    assert button.render("data-injection") == (
        '<button type="button" name="b" class="" hx-confirm="Sure?" data-injection>Go</button>'
    )


@pytest.mark.parametrize(
    "component",
    [
        TextArea(name="t", attributes={'k"': "<v>&'"}),
        Select(name="s", options={"a": "A"}, attributes={'k"': "<v>&'"}),
        Button(name="b", attributes={'k"': "<v>&'"}),
    ],
)
def test_extra_attributes_are_escaped_on_every_field(component: object) -> None:
    rendered = component.render()  # type: ignore[attr-defined]
    assert 'k&quot;="&lt;v&gt;&amp;&#x27;"' in rendered
    assert "<v>" not in rendered
