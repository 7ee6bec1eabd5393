"""Document reader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from json_schema_lite.document_loading import DocumentLoadError, load_schema, read_document
from json_schema_lite.schema_model import SchemaParseError


def test_reads_json_and_yaml_documents(tmp_path: Path) -> None:
    json_path = tmp_path / "instance.json"
    json_path.write_text('{"id": 1, "tags": ["a"]}', encoding="utf-8")
    yaml_path = tmp_path / "instance.yaml"
    yaml_path.write_text("id: 1\ntags:\n  - a\n", encoding="utf-8")

    assert read_document(json_path) == {"id": 1, "tags": ["a"]}
    assert read_document(yaml_path) == read_document(json_path)


def test_json_suffix_is_decoded_strictly(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text("type: object\n", encoding="utf-8")

    with pytest.raises(DocumentLoadError, match="Invalid JSON"):
        read_document(path)


def test_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoadError, match="Document file not found"):
        read_document(tmp_path / "absent.json")


def test_load_schema_parses_yaml_schema(tmp_path: Path) -> None:
    path = tmp_path / "schema.yaml"
    path.write_text(
        "$schema: http://json-schema.org/draft-07/schema#\n"
        "type: object\n"
        "properties:\n"
        "  name:\n"
        "    type: string\n",
        encoding="utf-8",
    )

    schema = load_schema(path)

    assert schema.draft_version() == "draft-07"
    assert schema.properties() is not None


def test_load_schema_does_not_reparse_string_documents(tmp_path: Path) -> None:
    path = tmp_path / "schema.yaml"
    path.write_text('"true"\n', encoding="utf-8")

    with pytest.raises(SchemaParseError, match="got string"):
        load_schema(path)
