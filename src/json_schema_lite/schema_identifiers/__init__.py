"""Schema identifier exports."""

from .schema_id import (
    FragmentId,
    InvalidSchemaIdError,
    JsonPointerId,
    PathId,
    SchemaId,
    UrlId,
    escape_pointer_token,
    is_absolute_url,
    is_json_pointer,
    parse_schema_id,
    unescape_pointer_token,
)

__all__ = [
    "SchemaId",
    "FragmentId",
    "UrlId",
    "JsonPointerId",
    "PathId",
    "InvalidSchemaIdError",
    "parse_schema_id",
    "is_absolute_url",
    "is_json_pointer",
    "escape_pointer_token",
    "unescape_pointer_token",
]
