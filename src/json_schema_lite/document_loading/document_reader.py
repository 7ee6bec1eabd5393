"""Reading schema and instance documents from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from json_schema_lite.schema_document import Schema

_JSON_SUFFIXES = frozenset({".json"})


class DocumentLoadError(Exception):
    """Raised when a document file cannot be read or decoded."""


def read_document(document_path: Path | str) -> Any:
    """Decode a JSON or YAML document into plain JSON values.

    Files ending in `.json` are decoded strictly as JSON; anything else goes
    through the YAML loader, which also accepts JSON text.
    """
    path = Path(document_path)
    if not path.exists():
        raise DocumentLoadError(f"Document file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

    if path.suffix.lower() in _JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Invalid YAML in {path}: {exc}") from exc


def load_schema(schema_path: Path | str) -> Schema:
    """Read a schema file and parse it into a `Schema`."""
    return Schema.from_value(read_document(schema_path))
