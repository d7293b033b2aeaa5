"""Escaping helpers and a minimal tag builder for HTML fragments."""
from __future__ import annotations

import html
import json
import re
from dataclasses import dataclass, field
from typing import Mapping

# Matches a JSON escape pair or a character that is unsafe inside HTML. Quotes
# only occur unescaped as string delimiters, which stay untouched.
_JSON_HTML_UNSAFE = re.compile(r"\\.|[<>'&]")


def escape_attr(value: object) -> str:
    """Escape ``value`` for use inside a double-quoted attribute."""

    return html.escape(_stringify(value), quote=True)


def escape_html(value: object) -> str:
    """Escape ``value`` for use as element content."""

    return html.escape(_stringify(value), quote=True)


def json_for_html(value: object) -> str:
    """Serialise ``value`` as JSON that can sit inside an attribute or script.

    Keys keep their insertion order. Inside string values the characters
    ``< > ' " &`` are written as ``\\uXXXX`` escapes, so the text never
    terminates a single-quoted attribute or a ``<script>`` element and still
    parses back to the same data.
    """

    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return _JSON_HTML_UNSAFE.sub(_escape_json_token, text)


def _escape_json_token(match: re.Match[str]) -> str:
    token = match.group(0)
    if token == '\\"':
        return "\\u%04x" % ord('"')
    if token.startswith("\\"):
        return token
    return "\\u%04x" % ord(token)


def render_attributes(attributes: Mapping[str, object] | None) -> str:
    """Return `` key="value"`` pairs for ``attributes`` in insertion order."""

    if not attributes:
        return ""
    return "".join(
        f' {escape_attr(key)}="{escape_attr(value)}"' for key, value in attributes.items()
    )


def _stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(slots=True)
class Tag:
    """An element under construction.

    Attributes are kept in the order they are added. ``content`` is inserted
    verbatim, so callers escape text before handing it over. A tag without
    content renders as a void element (no closing tag).
    """

    name: str
    content: str | None = None
    _parts: list[str] = field(default_factory=list)

    def attr(self, key: str, value: object) -> Tag:
        self._parts.append(f' {key}="{escape_attr(value)}"')
        return self

    def optional(self, key: str, value: object) -> Tag:
        """Add ``key`` only when ``value`` is a non-empty string."""

        if value is None or _stringify(value) == "":
            return self
        return self.attr(key, value)

    def flag(self, key: str, enabled: bool = True) -> Tag:
        if enabled:
            self._parts.append(f" {key}")
        return self

    def extend(self, attributes: Mapping[str, object] | None) -> Tag:
        self._parts.append(render_attributes(attributes))
        return self

    def raw(self, token: str) -> Tag:
        # Placeholder markers are spliced in unescaped.
        if token:
            self._parts.append(f" {token}")
        return self

    def render(self) -> str:
        opening = f"<{self.name}{''.join(self._parts)}>"
        if self.content is None:
            return opening
        return f"{opening}{self.content}</{self.name}>"


__all__ = [
    "Tag",
    "escape_attr",
    "escape_html",
    "json_for_html",
    "render_attributes",
]
