"""JSON decoding and encoding of schema trees."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from json_schema_lite.schema_identifiers import (
    InvalidSchemaIdError,
    escape_pointer_token,
    is_absolute_url,
    parse_schema_id,
)

from .schema_definition import SchemaDefinition, SchemaRoot
from .schema_nodes import (
    UNSUPPORTED_KEYWORDS,
    ArrayInstance,
    BooleanInstance,
    InstanceType,
    IntegerInstance,
    NullInstance,
    NumberCriteria,
    NumberInstance,
    ObjectInstance,
    Property,
    PropertyInstance,
    RefProperty,
    StringInstance,
)


class SchemaParseError(Exception):
    """Raised when a document does not fit the supported schema grammar."""


def decode_schema_root(value: Any) -> SchemaRoot:
    """Decode a parsed JSON value into a boolean schema or a definition."""
    if isinstance(value, bool):
        return value
    if isinstance(value, Mapping):
        return decode_definition(value, location="#")
    raise SchemaParseError(
        f"Schema root must be an object or a boolean, got {_json_type_name(value)}."
    )


def decode_definition(raw: Mapping[str, Any], *, location: str) -> SchemaDefinition:
    """Decode one object-form schema document or named sub-schema."""
    schema_id = None
    if "$id" in raw:
        raw_id = raw["$id"]
        if not isinstance(raw_id, str):
            raise SchemaParseError(
                f"{location}/$id must be a string, got {_json_type_name(raw_id)}."
            )
        try:
            schema_id = parse_schema_id(raw_id)
        except InvalidSchemaIdError as exc:
            raise SchemaParseError(f"{location}/$id: {exc}") from exc

    dialect = raw.get("$schema")
    if dialect is not None and not isinstance(dialect, str):
        raise SchemaParseError(
            f"{location}/$schema must be a string, got {_json_type_name(dialect)}."
        )
    if dialect is not None and not is_absolute_url(dialect):
        raise SchemaParseError(f"{location}/$schema must be an absolute URL, got {dialect!r}.")

    description = raw.get("description")
    if description is not None and not isinstance(description, str):
        raise SchemaParseError(f"{location}/description must be a string.")

    specification = None
    if "$ref" in raw or "type" in raw:
        specification = decode_property(raw, location=location)

    return SchemaDefinition(
        id=schema_id,
        dialect=dialect,
        description=description,
        dependencies=_decode_dependencies(raw.get("dependencies"), location),
        specification=specification,
        definitions=_decode_definitions(raw.get("definitions"), location),
    )


def decode_property(raw: Any, *, location: str) -> Property:
    """Decode a node as a `$ref` first, falling back to a concrete instance."""
    if not isinstance(raw, Mapping):
        raise SchemaParseError(f"{location} must be a schema object, got {_json_type_name(raw)}.")
    if "$ref" in raw:
        return _decode_reference(raw["$ref"], location)
    return decode_instance(raw, location=location)


def decode_instance(raw: Mapping[str, Any], *, location: str) -> PropertyInstance:
    """Decode a concrete instance description selected by its `type`."""
    type_name = raw.get("type")
    try:
        instance_type = InstanceType(type_name)
    except ValueError as exc:
        raise SchemaParseError(f"{location}/type has unsupported value {type_name!r}.") from exc

    unsupported = {key: raw[key] for key in UNSUPPORTED_KEYWORDS if key in raw}

    if instance_type is InstanceType.NULL:
        return NullInstance(unsupported=unsupported)
    if instance_type is InstanceType.BOOLEAN:
        return BooleanInstance(unsupported=unsupported)
    if instance_type is InstanceType.STRING:
        return StringInstance(unsupported=unsupported)
    if instance_type is InstanceType.INTEGER:
        return IntegerInstance(criteria=_decode_criteria(raw), unsupported=unsupported)
    if instance_type is InstanceType.NUMBER:
        return NumberInstance(criteria=_decode_criteria(raw), unsupported=unsupported)
    if instance_type is InstanceType.ARRAY:
        return ArrayInstance(items=_decode_items(raw, location), unsupported=unsupported)
    return ObjectInstance(
        properties=_decode_properties(raw.get("properties"), location),
        required=_decode_required(raw.get("required"), location),
        unsupported=unsupported,
    )


def encode_schema_root(root: SchemaRoot) -> Any:
    """Encode a schema root back into its JSON shape."""
    if isinstance(root, bool):
        return root
    return encode_definition(root)


def encode_definition(definition: SchemaDefinition) -> dict[str, Any]:
    """Encode a definition, flattening the specification keywords."""
    encoded: dict[str, Any] = {}
    if definition.id is not None:
        encoded["$id"] = str(definition.id)
    if definition.dialect is not None:
        encoded["$schema"] = definition.dialect
    if definition.description is not None:
        encoded["description"] = definition.description
    if definition.dependencies is not None:
        encoded["dependencies"] = {
            name: list(required) for name, required in definition.dependencies.items()
        }
    if definition.specification is not None:
        encoded.update(encode_property(definition.specification))
    if definition.definitions is not None:
        encoded["definitions"] = {
            name: encode_definition(child) for name, child in definition.definitions.items()
        }
    return encoded


def encode_property(node: Property) -> dict[str, Any]:
    """Encode one node with the same key names it was decoded from."""
    if isinstance(node, RefProperty):
        return {"$ref": node.reference}

    encoded: dict[str, Any] = {"type": node.instance_type.value}
    if isinstance(node, (IntegerInstance, NumberInstance)):
        if node.criteria.exclusive_minimum is not None:
            encoded["exclusiveMinimum"] = _thaw_json(node.criteria.exclusive_minimum)
    elif isinstance(node, ArrayInstance):
        encoded["items"] = encode_property(node.items)
    elif isinstance(node, ObjectInstance):
        encoded["properties"] = {
            name: encode_property(child) for name, child in node.properties.items()
        }
        if node.required is not None:
            encoded["required"] = list(node.required)
    encoded.update({key: _thaw_json(value) for key, value in node.unsupported.items()})
    return encoded


def _decode_reference(reference: Any, location: str) -> RefProperty:
    if not isinstance(reference, str):
        raise SchemaParseError(
            f"{location}/$ref must be a string, got {_json_type_name(reference)}."
        )
    try:
        parse_schema_id(reference)
    except InvalidSchemaIdError as exc:
        raise SchemaParseError(f"{location}/$ref: {exc}") from exc
    return RefProperty(reference=reference)


def _decode_criteria(raw: Mapping[str, Any]) -> NumberCriteria:
    return NumberCriteria(exclusive_minimum=raw.get("exclusiveMinimum"))


def _decode_items(raw: Mapping[str, Any], location: str) -> PropertyInstance:
    if "items" not in raw:
        raise SchemaParseError(f"{location} declares type 'array' without items.")
    items_location = f"{location}/items"
    items = decode_property(raw["items"], location=items_location)
    if isinstance(items, RefProperty):
        raise SchemaParseError(f"{items_location} must be a concrete schema, not a $ref.")
    return items


def _decode_properties(value: Any, location: str) -> dict[str, Property]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SchemaParseError(f"{location}/properties must be an object.")
    return {
        name: decode_property(
            child, location=f"{location}/properties/{escape_pointer_token(name)}"
        )
        for name, child in value.items()
    }


def _decode_required(value: Any, location: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not _is_string_list(value):
        raise SchemaParseError(f"{location}/required must be a list of strings.")
    return tuple(value)


def _decode_dependencies(value: Any, location: str) -> dict[str, tuple[str, ...]] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise SchemaParseError(f"{location}/dependencies must be an object.")
    dependencies: dict[str, tuple[str, ...]] = {}
    for name, required in value.items():
        if not _is_string_list(required):
            raise SchemaParseError(
                f"{location}/dependencies/{escape_pointer_token(name)} must be a list of strings."
            )
        dependencies[name] = tuple(required)
    return dependencies


def _decode_definitions(value: Any, location: str) -> dict[str, SchemaDefinition] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise SchemaParseError(f"{location}/definitions must be an object.")
    definitions: dict[str, SchemaDefinition] = {}
    for name, child in value.items():
        child_location = f"{location}/definitions/{escape_pointer_token(name)}"
        if not isinstance(child, Mapping):
            raise SchemaParseError(
                f"{child_location} must be a schema object, got {_json_type_name(child)}."
            )
        definitions[name] = decode_definition(child, location=child_location)
    return definitions


def _thaw_json(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw_json(member) for key, member in value.items()}
    if isinstance(value, tuple):
        return [_thaw_json(element) for element in value]
    return value


def _is_string_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and all(isinstance(item, str) for item in value)
    )


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__
