"""HTML fragments for the form wrapper."""
from __future__ import annotations

from ..markup import Tag


def render_form(
    body: str,
    *,
    submit_text: str,
    form_id: str = "",
    form_class: str = "",
    marker: str = "",
    submit_class: str,
) -> str:
    """Wrap ``body`` in a ``<form>`` followed by its submit control.

    ``body`` is inserted as-is. ``id`` and ``class`` are omitted when empty;
    ``marker`` (the injection placeholder) follows them when set.
    """

    submit = (
        Tag("input")
        .attr("class", submit_class)
        .attr("type", "submit")
        .attr("value", submit_text)
        .render()
    )
    return (
        Tag("form", content=body + submit)
        .optional("id", form_id)
        .optional("class", form_class)
        .raw(marker)
        .render()
    )


__all__ = ["render_form"]
