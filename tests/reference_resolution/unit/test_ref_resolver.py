"""Reference resolution tests."""

from __future__ import annotations

import logging

import pytest
from json_schema_lite import Schema
from json_schema_lite.reference_resolution import (
    UnresolvedReferenceError,
    dereference,
    reference_segments,
    resolve_reference,
)
from json_schema_lite.schema_model import (
    IntegerInstance,
    NumberInstance,
    ObjectInstance,
    RefProperty,
    StringInstance,
)

ADDRESS_DOCUMENT = Schema.parse(
    {
        "type": "object",
        "properties": {
            "address": {
                "type": "object",
                "properties": {
                    "street": {"type": "string"},
                    "properties": {
                        "type": "object",
                        "properties": {"flag": {"type": "boolean"}},
                    },
                },
            },
            "tags": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"weight": {"type": "number"}},
                },
            },
            "alias": {"$ref": "#/properties/address/properties/street"},
            "alias_of_alias": {"$ref": "#/properties/alias"},
            "loop_a": {"$ref": "#/properties/loop_b"},
            "loop_b": {"$ref": "#/properties/loop_a"},
        },
        "definitions": {
            "count": {"type": "integer"},
            "nested": {"definitions": {"leaf": {"$ref": "#/definitions/count"}}},
        },
    }
)


def test_resolves_nested_property_pointer() -> None:
    target = resolve_reference("#/properties/address/properties/street", ADDRESS_DOCUMENT.root)

    assert target == StringInstance()


def test_accepts_ref_property_values() -> None:
    reference = RefProperty("#/properties/address/properties/street")

    assert resolve_reference(reference, ADDRESS_DOCUMENT.root) == StringInstance()


def test_properties_segment_on_map_looks_up_a_property_named_properties() -> None:
    target = ADDRESS_DOCUMENT.resolve("#/properties/address/properties/properties/flag")

    assert target is not None
    assert target.instance_type.value == "boolean"


def test_items_segment_moves_into_array_item_schema() -> None:
    target = ADDRESS_DOCUMENT.resolve("#/properties/tags/items/properties/weight")

    assert target == NumberInstance()


def test_follows_chained_references() -> None:
    assert ADDRESS_DOCUMENT.resolve("#/properties/alias_of_alias") == StringInstance()


def test_resolves_named_definitions() -> None:
    assert ADDRESS_DOCUMENT.resolve("#/definitions/count") == IntegerInstance()
    assert ADDRESS_DOCUMENT.resolve("#/definitions/nested/definitions/leaf") == IntegerInstance()


def test_path_ending_on_the_whole_object_returns_it() -> None:
    target = ADDRESS_DOCUMENT.resolve("#/properties/address")

    assert isinstance(target, ObjectInstance)
    assert set(target.properties) == {"street", "properties"}


@pytest.mark.parametrize(
    "reference",
    [
        "#/properties/missing",
        "#/properties/address/street",
        "#/properties/address/properties/street/items",
        "#/items",
        "#/definitions/unknown",
        "#/properties",
        "http://example.com/address.schema.json",
        "#foo",
        "t/inner.json",
    ],
)
def test_unresolvable_references_yield_none(reference: str) -> None:
    assert resolve_reference(reference, ADDRESS_DOCUMENT.root) is None


def test_definition_without_type_dereferences_to_accept_anything() -> None:
    assert dereference("#/definitions/nested", ADDRESS_DOCUMENT.root) is None
    assert resolve_reference("#/definitions/nested", ADDRESS_DOCUMENT.root) is None


def test_map_positions_are_not_schema_nodes() -> None:
    with pytest.raises(UnresolvedReferenceError, match="path does not end on a schema node"):
        dereference("#/definitions", ADDRESS_DOCUMENT.root)


def test_boolean_schema_has_nothing_to_resolve() -> None:
    with pytest.raises(UnresolvedReferenceError, match="boolean schemas"):
        dereference("#/properties/a", True)


def test_reference_cycle_is_detected(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING), pytest.raises(
        UnresolvedReferenceError, match="reference cycle"
    ):
        dereference("#/properties/loop_a", ADDRESS_DOCUMENT.root)

    assert "Reference cycle detected" in caplog.text


def test_chain_longer_than_max_depth_is_rejected() -> None:
    with pytest.raises(UnresolvedReferenceError, match="chain longer than 1 references"):
        dereference("#/properties/alias_of_alias", ADDRESS_DOCUMENT.root, max_depth=1)


def test_error_names_the_reference_and_reason() -> None:
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        dereference("#/properties/missing", ADDRESS_DOCUMENT.root)

    assert excinfo.value.reference == "#/properties/missing"
    assert "segment 'missing' does not apply" in excinfo.value.reason


def test_segments_are_unescaped() -> None:
    assert reference_segments("#/properties/a~1b/c~0d/e%20f") == (
        "properties",
        "a/b",
        "c~d",
        "e f",
    )


def test_escaped_segment_reaches_key_containing_slash() -> None:
    schema = Schema.parse({"type": "object", "properties": {"a/b": {"type": "null"}}})

    target = schema.resolve("#/properties/a~1b")

    assert target is not None
    assert target.instance_type.value == "null"
