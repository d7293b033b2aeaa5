"""Replace the injection placeholder with htmx request attributes.

Markup handed to :func:`inject` carries the ``data-injection`` token wherever
request attributes belong. Every occurrence is replaced by the same attribute
block (``hx-get``/``hx-post``, optional ``hx-vals`` and any extra attributes).
The output may also gain a loading indicator, a target placeholder ``<span>``
and, once per :class:`EmissionFlag`, a script that turns ``htmx:error`` and
``htmx:timeout`` events into a warning inside the request target.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping

from .constants import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_LIBRARY_URL,
    DEFAULT_TIMEOUT_MESSAGE,
    INJECTION_MARKER,
    TARGET_AFTER,
    TARGET_BEFORE,
    TARGET_NONE,
)
from .markup import Tag, escape_attr, json_for_html
from .results import MISSING_MARKER, MISSING_REQUEST_URL, Skipped

logger = logging.getLogger(__name__)


class EmissionFlag:
    """One-shot "already emitted" cell shared by injector calls.

    ``claim`` is an atomic check-and-set: it returns ``True`` for exactly one
    caller over the lifetime of the instance.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._emitted = False

    @property
    def emitted(self) -> bool:
        return self._emitted

    def claim(self) -> bool:
        with self._lock:
            if self._emitted:
                return False
            self._emitted = True
            return True


# Process-wide default, unset at import and never reset by this package.
ERROR_SCRIPT_FLAG = EmissionFlag()


@dataclass(slots=True)
class InjectionConfig:
    """Settings for one :func:`inject` call.

    ``target_selector`` falls back to ``attributes["hx-target"]``. An
    ``indicator_markup`` of ``None`` means "build an ``<img>`` from
    ``indicator_url``"; an empty string disables the indicator.
    """

    request_url: str
    use_get: bool = False
    query_string: str = ""
    values: Mapping[str, Any] | None = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    show_indicator: bool = True
    indicator_markup: str | None = None
    indicator_url: str = ""
    target_selector: str | None = None
    target_position: str = TARGET_NONE
    error_message: str = ""
    timeout_message: str = ""
    load_library: bool = False
    library_url: str = DEFAULT_LIBRARY_URL


class AttributeInjector:
    def __init__(self, config: InjectionConfig, *, flag: EmissionFlag | None = None) -> None:
        self.config = config
        self._flag = flag

    @property
    def flag(self) -> EmissionFlag:
        return self._flag if self._flag is not None else ERROR_SCRIPT_FLAG

    def inject(self, html: str) -> str:
        """Return ``html`` with attributes injected, or unchanged when skipped."""

        result = self.prepare(html)
        if isinstance(result, Skipped):
            return html
        return result

    def prepare(self, html: str) -> str | Skipped:
        config = self.config
        if not html or INJECTION_MARKER not in html:
            logger.warning("HTML input without %s placeholder", INJECTION_MARKER)
            return Skipped(MISSING_MARKER)
        if not config.request_url:
            logger.warning("No request URL configured; leaving markup untouched")
            return Skipped(MISSING_REQUEST_URL)

        output = html.replace(INJECTION_MARKER, self.attribute_block())
        if config.load_library and config.library_url:
            output = library_script(config.library_url) + output
        output = _add_indicator(output, self.indicator_markup())
        output = self._add_target(output)
        if self.flag.claim():
            output += error_script(config.error_message, config.timeout_message)
        return output

    def attribute_block(self) -> str:
        """Attributes that replace the marker, joined by single spaces.

        The URL and the extra attribute keys and values are attribute-escaped,
        so ``&`` reads ``&amp;`` and ``"`` reads ``&quot;`` in the output. A
        browser decodes them to the same values as the unescaped form.
        """

        config = self.config
        method = "hx-get" if config.use_get else "hx-post"
        url = config.request_url
        if config.query_string:
            url += "?" + config.query_string
        parts = [f'{method}="{escape_attr(url)}"']
        if config.values:
            parts.append(f"hx-vals='{json_for_html(dict(config.values))}'")
        for key, value in config.attributes.items():
            parts.append(f'{escape_attr(key)}="{escape_attr(value)}"')
        return " ".join(parts)

    def indicator_markup(self) -> str:
        config = self.config
        if not config.show_indicator:
            return ""
        if config.indicator_markup is not None:
            return config.indicator_markup
        if not config.indicator_url:
            return ""
        return (
            Tag("img")
            .attr("class", "htmx-indicator")
            .attr("id", "spinner")
            .attr("src", config.indicator_url)
            .attr("height", 15)
            .attr("width", 15)
            .render()
        )

    def _add_target(self, output: str) -> str:
        config = self.config
        selector = config.target_selector or config.attributes.get("hx-target")
        if not selector or config.target_position == TARGET_NONE:
            return output
        span = Tag("span", content="").attr("id", selector.replace("#", "")).render()
        if config.target_position == TARGET_BEFORE:
            return span + output
        if config.target_position == TARGET_AFTER:
            return output + span
        return output


def inject(html: str, config: InjectionConfig, *, flag: EmissionFlag | None = None) -> str:
    """Shortcut for ``AttributeInjector(config, flag=flag).inject(html)``."""

    return AttributeInjector(config, flag=flag).inject(html)


def _add_indicator(output: str, indicator: str) -> str:
    # Textual heuristic: only a document that opens and closes a form gets the
    # indicator inside it, before the first closing tag.
    if not indicator:
        return output
    if "<form" in output and "</form>" in output:
        return output.replace("</form>", indicator + "</form>", 1)
    return output + indicator


def library_script(url: str) -> str:
    return Tag("script", content="").attr("src", url).flag("defer").render()


def error_script(error_message: str = "", timeout_message: str = "") -> str:
    """Return the ``htmx:error``/``htmx:timeout`` handler script.

    The handler reads ``hx-target`` from the element that issued the request
    and does nothing when the attribute or the element it names is missing.
    """

    error_text = json_for_html(error_message or DEFAULT_ERROR_MESSAGE)
    timeout_text = json_for_html(timeout_message or DEFAULT_TIMEOUT_MESSAGE)
    return (
        "<script>(function(){"
        "function showHtmxWarning(event,message){"
        "var source=event.detail&&event.detail.elt;"
        "if(!source){return;}"
        "var selector=source.getAttribute('hx-target');"
        "if(!selector){return;}"
        "var target=document.querySelector(selector);"
        "if(!target){return;}"
        "var warning=document.createElement('div');"
        "warning.className='alert alert-warning';"
        "warning.textContent=message;"
        "target.replaceChildren(warning);"
        "}"
        "document.body.addEventListener('htmx:error',function(event){showHtmxWarning(event,"
        + error_text
        + ");});"
        "document.body.addEventListener('htmx:timeout',function(event){showHtmxWarning(event,"
        + timeout_text
        + ");});"
        "})();</script>"
    )


__all__ = [
    "AttributeInjector",
    "ERROR_SCRIPT_FLAG",
    "EmissionFlag",
    "InjectionConfig",
    "error_script",
    "inject",
    "library_script",
]
