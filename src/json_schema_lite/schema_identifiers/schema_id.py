"""Schema identifier parsing for `$id` values."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlsplit

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_POINTER_ESCAPE_PATTERN = re.compile(r"~(?![01])")


class InvalidSchemaIdError(ValueError):
    """Raised when a string matches none of the identifier grammars."""


@dataclass(frozen=True)
class SchemaId:
    """Base for the four identifier shapes accepted in `$id`."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FragmentId(SchemaId):
    """Plain-name fragment such as `#foo`, stored without the marker."""

    def __str__(self) -> str:
        return f"#{self.value}"


@dataclass(frozen=True)
class UrlId(SchemaId):
    """Absolute URI identifier."""


@dataclass(frozen=True)
class JsonPointerId(SchemaId):
    """RFC 6901 pointer identifier."""

    @property
    def tokens(self) -> tuple[str, ...]:
        """Return the unescaped reference tokens."""
        if not self.value:
            return ()
        return tuple(unescape_pointer_token(token) for token in self.value[1:].split("/"))


@dataclass(frozen=True)
class PathId(SchemaId):
    """Relative path identifier such as `t/inner.json`."""


def is_absolute_url(text: str) -> bool:
    """Return True when text is an absolute URI with a scheme."""
    if _contains_whitespace(text) or not _SCHEME_PATTERN.match(text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    return bool(parts.netloc or parts.path or parts.query or parts.fragment)


def is_json_pointer(text: str) -> bool:
    """Return True when text is a syntactically valid RFC 6901 pointer."""
    if text == "":
        return True
    if not text.startswith("/") or _contains_whitespace(text):
        return False
    return _POINTER_ESCAPE_PATTERN.search(text) is None


def unescape_pointer_token(token: str) -> str:
    """Decode `~1` and `~0` escapes in one pointer token."""
    return token.replace("~1", "/").replace("~0", "~")


def escape_pointer_token(token: str) -> str:
    """Encode `~` and `/` in one pointer token."""
    return token.replace("~", "~0").replace("/", "~1")


def parse_schema_id(text: str) -> SchemaId:
    """Parse an `$id` value into the first identifier shape that accepts it.

    The grammars overlap, so the order is fixed: fragment, absolute URL,
    JSON pointer, then bare path.

    Raises:
      InvalidSchemaIdError: If no shape accepts the text.
    """
    if not isinstance(text, str):
        raise InvalidSchemaIdError(f"Schema id must be a string, got {type(text).__name__}.")
    for parser in _PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    raise InvalidSchemaIdError(f"Invalid schema identifier: {text!r}")


def _parse_fragment(text: str) -> SchemaId | None:
    if text.startswith("#"):
        return FragmentId(text[1:])
    return None


def _parse_url(text: str) -> SchemaId | None:
    return UrlId(text) if is_absolute_url(text) else None


def _parse_pointer(text: str) -> SchemaId | None:
    return JsonPointerId(text) if is_json_pointer(text) else None


def _parse_path(text: str) -> SchemaId | None:
    return None if _contains_whitespace(text) else PathId(text)


def _contains_whitespace(text: str) -> bool:
    return any(character.isspace() for character in text)


_PARSERS: tuple[Callable[[str], SchemaId | None], ...] = (
    _parse_fragment,
    _parse_url,
    _parse_pointer,
    _parse_path,
)
