"""Result records for operations that skip bad input instead of raising."""
from __future__ import annotations

from dataclasses import dataclass

MISSING_NAME = "missing-name"
MISSING_OPTIONS = "missing-options"
UNKNOWN_INPUT_TYPE = "unknown-input-type"
UNKNOWN_BUTTON_TYPE = "unknown-button-type"
MISSING_MARKER = "missing-marker"
MISSING_REQUEST_URL = "missing-request-url"


@dataclass(frozen=True, slots=True)
class Skipped:
    """An operation was discarded because its input was incomplete.

    Instances are falsy so ``if registry.append_input(...):`` reads naturally.
    """

    reason: str
    detail: str = ""

    def __bool__(self) -> bool:
        return False


__all__ = [
    "MISSING_MARKER",
    "MISSING_NAME",
    "MISSING_OPTIONS",
    "MISSING_REQUEST_URL",
    "Skipped",
    "UNKNOWN_BUTTON_TYPE",
    "UNKNOWN_INPUT_TYPE",
]
