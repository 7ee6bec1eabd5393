"""Schema document accessor tests."""

from __future__ import annotations

import json

import pytest
from json_schema_lite import Schema, SchemaParseError
from json_schema_lite.schema_identifiers import FragmentId, PathId, UrlId
from json_schema_lite.schema_model import (
    ArrayInstance,
    IntegerInstance,
    ObjectInstance,
    RefProperty,
    StringInstance,
)

PRODUCT_SCHEMA = """{
  "$schema": "http://json-schema.org/draft-07/schema#",
  "description": "A product from Acme's catalog",
  "type": "object",
  "properties": {
    "productId": {
      "description": "The unique identifier for a product",
      "type": "integer"
    }
  },
  "required": [ "productId" ]
}"""


def test_parses_text_and_decoded_value_to_equal_schemas() -> None:
    assert Schema.parse(PRODUCT_SCHEMA) == Schema.parse(json.loads(PRODUCT_SCHEMA))


def test_invalid_json_text_raises_parse_error() -> None:
    with pytest.raises(SchemaParseError, match="Invalid JSON schema text"):
        Schema.parse("{not-valid-json}")


def test_schema_must_be_a_url() -> None:
    with pytest.raises(SchemaParseError):
        Schema.parse(PRODUCT_SCHEMA.replace("http://json-schema.org/draft-07/schema#", "not a uri"))


def test_id_must_not_contain_spaces() -> None:
    raw = json.loads(PRODUCT_SCHEMA)
    raw["$id"] = "not a uri"

    with pytest.raises(SchemaParseError):
        Schema.parse(raw)


@pytest.mark.parametrize(
    ("raw_id", "expected"),
    [
        ("urn:uuid:ee564b8a-7a87-4125-8c96-e9f123d6766f", UrlId),
        ("#foo", FragmentId),
        ("t/inner.json", PathId),
    ],
)
def test_id_accepts_uuid_fragment_and_path(raw_id: str, expected: type) -> None:
    schema = Schema.parse({"$schema": "http://json-schema.org/draft-07/schema#", "$id": raw_id})

    assert isinstance(schema.id(), expected)
    assert str(schema.id()) == raw_id


def test_id_is_optional() -> None:
    assert Schema.parse(PRODUCT_SCHEMA).id() is None


def test_draft_version_is_first_dialect_path_segment() -> None:
    schema = Schema.parse(PRODUCT_SCHEMA)

    assert schema.dialect() == "http://json-schema.org/draft-07/schema#"
    assert schema.draft_version() == "draft-07"


@pytest.mark.parametrize(
    "raw",
    [
        "true",
        "{}",
        '{"$schema": "urn:example:dialect"}',
        '{"$schema": "http://json-schema.org"}',
    ],
)
def test_draft_version_is_none_without_a_path_segment(raw: str) -> None:
    assert Schema.parse(raw).draft_version() is None


def test_object_root_projections() -> None:
    schema = Schema.parse(PRODUCT_SCHEMA)

    assert schema.description() == "A product from Acme's catalog"
    assert schema.specification() == schema.as_object()
    assert schema.properties() == {"productId": IntegerInstance()}
    assert schema.required_properties() == ("productId",)
    assert schema.as_array() is None
    assert schema.as_integer() is None


def test_empty_properties_still_yield_a_specification() -> None:
    schema = Schema.parse(
        {
            "$id": "https://example.com/address.schema.json",
            "type": "object",
            "properties": {},
            "dependencies": {"post-office-box": ["street-address"]},
        }
    )

    assert schema.specification() == ObjectInstance()
    assert schema.dependencies() == {"post-office-box": ("street-address",)}


def test_non_object_roots_are_reached_through_typed_accessors() -> None:
    schema = Schema.parse({"type": "array", "items": {"type": "string"}})

    assert schema.specification() is None
    assert schema.properties() is None
    assert schema.required_properties() is None
    assert schema.as_array() == ArrayInstance(items=StringInstance())
    assert schema.as_object() is None
    assert schema.as_null() is None
    assert schema.as_boolean() is None
    assert schema.as_number() is None
    assert schema.as_string() is None


def test_reference_root_has_no_typed_projection() -> None:
    schema = Schema.parse({"$ref": "#/definitions/a", "definitions": {"a": {"type": "null"}}})

    assert schema.root_node() == RefProperty("#/definitions/a")
    assert schema.specification() is None
    assert schema.as_null() is None


def test_boolean_schema_projections_are_empty() -> None:
    schema = Schema.parse("false")

    assert schema.definition is None
    assert schema.id() is None
    assert schema.dialect() is None
    assert schema.description() is None
    assert schema.definitions() is None
    assert schema.specification() is None


def test_round_trip_through_serialization_is_lossless() -> None:
    schema = Schema.parse(PRODUCT_SCHEMA)

    assert Schema.parse(schema.to_json_text()) == schema
    assert Schema.parse(Schema.parse("true").to_json_text()) == Schema.parse("true")
