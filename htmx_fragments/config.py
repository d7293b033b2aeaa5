"""Configuration loading for htmx_fragments."""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

from .constants import (
    DEFAULT_INDICATOR_URL,
    DEFAULT_LIBRARY_URL,
    DEFAULT_REQUEST_URL,
    DEFAULT_TABLE_ID,
    FORM_SUBMIT_CLASS,
    FORM_TABLE_CLASS,
    TARGET_NONE,
    TARGET_POSITIONS,
)
from .injection import InjectionConfig


class ConfigError(ValueError):
    """Raised when a configuration file contains an unusable value."""


@dataclass(slots=True)
class InjectionSettings:
    """Defaults for attribute injection.

    ``request_url`` is the endpoint every injected ``hx-get``/``hx-post``
    points at; resolving it for a given deployment is up to the caller.
    """

    request_url: str = DEFAULT_REQUEST_URL
    indicator_url: str = DEFAULT_INDICATOR_URL
    show_indicator: bool = True
    error_message: str = ""
    timeout_message: str = ""
    library_url: str = DEFAULT_LIBRARY_URL
    target_position: str = TARGET_NONE


@dataclass(slots=True)
class TableSettings:
    """Defaults for :meth:`Renderer.render_table`."""

    id: str = DEFAULT_TABLE_ID
    css_class: str = ""
    cell_class: str = ""


@dataclass(slots=True)
class FormSettings:
    """Defaults for :meth:`Renderer.render_form`."""

    submit_class: str = FORM_SUBMIT_CLASS
    table_class: str = FORM_TABLE_CLASS


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    injection: InjectionSettings = field(default_factory=InjectionSettings)
    table: TableSettings = field(default_factory=TableSettings)
    form: FormSettings = field(default_factory=FormSettings)

    def injection_config(self, **overrides: Any) -> InjectionConfig:
        """Build an :class:`InjectionConfig` seeded from ``[injection]``."""

        settings = self.injection
        values: dict[str, Any] = {
            "request_url": settings.request_url,
            "indicator_url": settings.indicator_url,
            "show_indicator": settings.show_indicator,
            "error_message": settings.error_message,
            "timeout_message": settings.timeout_message,
            "library_url": settings.library_url,
            "target_position": settings.target_position,
        }
        values.update(overrides)
        return InjectionConfig(**values)


def _load_toml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` if provided, otherwise defaults.

    Parameters
    ----------
    path:
        Path to a TOML file with optional ``[injection]``, ``[table]`` and
        ``[form]`` tables. A missing file yields the defaults.
    """

    cfg = Config()
    if path is None:
        return cfg

    data = _load_toml(Path(path))
    injection_data = _section(data, "injection")
    if injection_data is not None:
        cfg.injection = _parse_injection(injection_data, base=cfg.injection)
    table_data = _section(data, "table")
    if table_data is not None:
        cfg.table = _parse_table(table_data, base=cfg.table)
    form_data = _section(data, "form")
    if form_data is not None:
        cfg.form = _parse_form(form_data, base=cfg.form)
    return cfg


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any] | None:
    if name not in data:
        return None
    value = data[name]
    if not isinstance(value, Mapping):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _parse_injection(data: Mapping[str, Any], base: InjectionSettings) -> InjectionSettings:
    overrides: MutableMapping[str, Any] = {}
    for key in ("request_url", "indicator_url", "error_message", "timeout_message", "library_url"):
        if key in data:
            overrides[key] = str(data[key])
    if "show_indicator" in data:
        overrides["show_indicator"] = bool(data["show_indicator"])
    if "target_position" in data:
        position = str(data["target_position"]).lower()
        if position not in TARGET_POSITIONS:
            allowed = ", ".join(TARGET_POSITIONS)
            raise ConfigError(f"injection.target_position must be one of: {allowed}")
        overrides["target_position"] = position
    if not overrides:
        return base
    return replace(base, **overrides)


def _parse_table(data: Mapping[str, Any], base: TableSettings) -> TableSettings:
    overrides: MutableMapping[str, Any] = {}
    if "id" in data:
        table_id = str(data["id"])
        if not table_id:
            raise ConfigError("table.id must not be empty")
        overrides["id"] = table_id
    if "class" in data:
        overrides["css_class"] = str(data["class"])
    if "cell_class" in data:
        overrides["cell_class"] = str(data["cell_class"])
    if not overrides:
        return base
    return replace(base, **overrides)


def _parse_form(data: Mapping[str, Any], base: FormSettings) -> FormSettings:
    overrides: MutableMapping[str, Any] = {}
    if "submit_class" in data:
        overrides["submit_class"] = str(data["submit_class"])
    if "table_class" in data:
        overrides["table_class"] = str(data["table_class"])
    if not overrides:
        return base
    return replace(base, **overrides)


__all__ = [
    "Config",
    "ConfigError",
    "FormSettings",
    "InjectionSettings",
    "TableSettings",
    "load_config",
]
