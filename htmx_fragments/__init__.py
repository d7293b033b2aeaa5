"""Server-side HTML form fragments with htmx attribute injection.

Components are appended to a :class:`ComponentRegistry` in display order and
rendered by a :class:`Renderer` as flat markup, a table or a complete form.
:func:`inject` replaces the ``data-injection`` placeholder in any markup with
htmx request attributes.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .components import Button, InputField, Select, Spacer, Subheader, TextArea
from .config import Config, ConfigError, load_config
from .injection import AttributeInjector, EmissionFlag, InjectionConfig, inject
from .registry import ComponentRegistry
from .render import FormConfig, Renderer
from .results import Skipped

__all__ = [
    "AttributeInjector",
    "Button",
    "ComponentRegistry",
    "Config",
    "ConfigError",
    "EmissionFlag",
    "FormConfig",
    "InjectionConfig",
    "InputField",
    "Renderer",
    "Select",
    "Skipped",
    "Spacer",
    "Subheader",
    "TextArea",
    "__version__",
    "inject",
    "load_config",
]
