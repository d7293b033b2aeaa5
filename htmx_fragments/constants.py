"""Shared markup constants for htmx_fragments."""
from __future__ import annotations

from typing import Final

INJECTION_MARKER: Final[str] = "data-injection"

INPUT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "text",
        "email",
        "number",
        "password",
        "tel",
        "url",
        "search",
        "date",
        "time",
        "datetime-local",
        "color",
        "range",
        "checkbox",
        "radio",
        "hidden",
        "reset",
        "button",
    }
)
BUTTON_TYPES: Final[tuple[str, ...]] = ("submit", "button", "reset")

DEFAULT_TABLE_ID: Final[str] = "inputs-table"
FORM_TABLE_CLASS: Final[str] = "form-table"
FORM_SUBMIT_CLASS: Final[str] = "htmx-form-submit"

DEFAULT_REQUEST_URL: Final[str] = "/ajax"
DEFAULT_INDICATOR_URL: Final[str] = "/images/spinner.gif"
DEFAULT_LIBRARY_URL: Final[str] = "https://unpkg.com/htmx.org@2.0.4"
DEFAULT_ERROR_MESSAGE: Final[str] = "An error occurred."
DEFAULT_TIMEOUT_MESSAGE: Final[str] = "Request timed out."

TARGET_NONE: Final[str] = "none"
TARGET_BEFORE: Final[str] = "before"
TARGET_AFTER: Final[str] = "after"
TARGET_POSITIONS: Final[tuple[str, ...]] = (TARGET_NONE, TARGET_BEFORE, TARGET_AFTER)


__all__ = [
    "BUTTON_TYPES",
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_INDICATOR_URL",
    "DEFAULT_LIBRARY_URL",
    "DEFAULT_REQUEST_URL",
    "DEFAULT_TABLE_ID",
    "DEFAULT_TIMEOUT_MESSAGE",
    "FORM_SUBMIT_CLASS",
    "FORM_TABLE_CLASS",
    "INJECTION_MARKER",
    "INPUT_TYPES",
    "TARGET_AFTER",
    "TARGET_BEFORE",
    "TARGET_NONE",
    "TARGET_POSITIONS",
]
