"""Layout fragments used by :mod:`htmx_fragments.render`."""
from __future__ import annotations

from .form import render_form
from .table import render_table

__all__ = ["render_form", "render_table"]
