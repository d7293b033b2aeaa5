"""HTML fragments for the table layout."""
from __future__ import annotations

from typing import Sequence

from ..components import FieldComponent, Spacer, Subheader
from ..markup import Tag, escape_html
from ..registry import RenderedComponent


def render_table(
    entries: Sequence[RenderedComponent],
    *,
    table_id: str,
    table_class: str = "",
    cell_class: str = "",
) -> str:
    """Render one row per entry inside a ``<table>``.

    Cell classes are ``{cell_class}{table_id}-col-N``; field markup is placed
    as-is while the decoration columns are escaped.
    """

    cell_prefix = cell_class
    rows = "".join(_render_row(entry, table_id, cell_prefix) for entry in entries)
    return (
        Tag("table", content=rows)
        .attr("id", table_id)
        .attr("class", table_class)
        .render()
    )


def _render_row(entry: RenderedComponent, table_id: str, cell_prefix: str) -> str:
    component = entry.component
    if isinstance(component, Spacer):
        return "<tr>" + _cell(f"{cell_prefix}{table_id}-col-empty", "&nbsp;", colspan=3) + "</tr>"
    if isinstance(component, Subheader):
        label = "<strong>" + escape_html(component.label) + "</strong>"
        return "<tr>" + _cell(f"{cell_prefix}{table_id}-col-subheader", label, colspan=3) + "</tr>"
    return _field_row(component, entry.html, table_id, cell_prefix)


def _field_row(component: FieldComponent, markup: str, table_id: str, cell_prefix: str) -> str:
    cells = [
        _cell(f"{cell_prefix}{table_id}-col-1", escape_html(component.column_before or "")),
        _cell(f"{cell_prefix}{table_id}-col-2", markup),
    ]
    if component.column_after is not None:
        cells.append(_cell(f"{cell_prefix}{table_id}-col-3", escape_html(component.column_after)))
    return "<tr>" + "".join(cells) + "</tr>"


def _cell(css_class: str, content: str, *, colspan: int | None = None) -> str:
    tag = Tag("td", content=content).attr("class", css_class)
    if colspan is not None:
        tag.attr("colspan", colspan)
    return tag.render()


__all__ = ["render_table"]
