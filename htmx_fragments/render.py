"""Terminal renderers over a :class:`ComponentRegistry`.

Each operation reads the registry without changing it, so repeated calls on
an unchanged registry return identical strings. The registry's raw prefix and
suffix wrap the output of :meth:`Renderer.render_flat` and
:meth:`Renderer.render_table`; :meth:`Renderer.render_form` applies them once,
inside the form body.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import Config
from .registry import ComponentRegistry
from .views.form import render_form
from .views.table import render_table


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Arguments for :meth:`Renderer.render_form`.

    ``submit_text`` is required. With ``use_table`` the body is rendered as a
    table whose id is ``{id}-table`` (or the configured table id when the
    form has no id).
    """

    submit_text: str
    id: str = ""
    css_class: str = ""
    use_table: bool = False


class Renderer:
    def __init__(self, registry: ComponentRegistry, config: Config | None = None) -> None:
        self.registry = registry
        self.config = config or Config()

    def render_flat(self) -> str:
        body = "".join(entry.html for entry in self.registry.entries)
        return self._wrap(body)

    def render_table(
        self,
        table_id: str | None = None,
        table_class: str | None = None,
        cell_class: str | None = None,
    ) -> str:
        settings = self.config.table
        table_html = render_table(
            self.registry.entries,
            table_id=table_id or settings.id,
            table_class=settings.css_class if table_class is None else table_class,
            cell_class=settings.cell_class if cell_class is None else cell_class,
        )
        return self._wrap(table_html)

    def render_form(self, form: FormConfig) -> str:
        settings = self.config.form
        if form.use_table:
            table_id = f"{form.id}-table" if form.id else None
            body = self.render_table(table_id, settings.table_class)
        else:
            body = self.render_flat()
        return render_form(
            body,
            submit_text=form.submit_text,
            form_id=form.id,
            form_class=form.css_class,
            marker=self.registry.injection_marker,
            submit_class=settings.submit_class,
        )

    def _wrap(self, body: str) -> str:
        return self.registry.prefix + body + self.registry.suffix


__all__ = ["FormConfig", "Renderer"]
