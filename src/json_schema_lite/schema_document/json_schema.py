"""Root schema document and its read-only accessor API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import urlsplit

from json_schema_lite.configuration.runtime_settings import ValidatorSettings
from json_schema_lite.instance_validation import ValidationReport, validate_schema
from json_schema_lite.reference_resolution import resolve_reference
from json_schema_lite.schema_identifiers import SchemaId
from json_schema_lite.schema_model import (
    ArrayInstance,
    BooleanInstance,
    IntegerInstance,
    NullInstance,
    NumberInstance,
    ObjectInstance,
    Property,
    PropertyInstance,
    RefProperty,
    SchemaDefinition,
    SchemaParseError,
    SchemaRoot,
    StringInstance,
    decode_schema_root,
    encode_schema_root,
)

_InstanceT = TypeVar("_InstanceT", bound=PropertyInstance)


@dataclass(frozen=True)
class Schema:
    """A parsed JSON Schema document: a definition object or a boolean schema."""

    root: SchemaRoot

    @classmethod
    def parse(cls, source: str | bytes | Any) -> Schema:
        """Build a schema from JSON text or an already-decoded JSON value.

        Raises:
          SchemaParseError: If the text is not JSON or the document does not
            fit the supported grammar.
        """
        if isinstance(source, (str, bytes, bytearray)):
            try:
                value = json.loads(source)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise SchemaParseError(f"Invalid JSON schema text: {exc}") from exc
        else:
            value = source
        return cls.from_value(value)

    @classmethod
    def from_value(cls, value: Any) -> Schema:
        """Build a schema from a decoded JSON value; strings are not re-parsed."""
        return cls(root=decode_schema_root(value))

    @property
    def definition(self) -> SchemaDefinition | None:
        """Return the definition object, or None for a boolean schema."""
        return None if isinstance(self.root, bool) else self.root

    def draft_version(self) -> str | None:
        """Return the first path segment of `$schema`, e.g. `draft-07`."""
        dialect = self.dialect()
        if dialect is None:
            return None
        path = urlsplit(dialect).path
        if not path.startswith("/"):
            return None
        return path[1:].split("/", 1)[0] or None

    def id(self) -> SchemaId | None:
        definition = self.definition
        return definition.id if definition is not None else None

    def dialect(self) -> str | None:
        definition = self.definition
        return definition.dialect if definition is not None else None

    def description(self) -> str | None:
        definition = self.definition
        return definition.description if definition is not None else None

    def dependencies(self) -> Mapping[str, tuple[str, ...]] | None:
        definition = self.definition
        return definition.dependencies if definition is not None else None

    def definitions(self) -> Mapping[str, SchemaDefinition] | None:
        definition = self.definition
        return definition.definitions if definition is not None else None

    def root_node(self) -> Property | None:
        """Return the flattened root specification, concrete or `$ref`."""
        definition = self.definition
        return definition.specification if definition is not None else None

    def specification(self) -> ObjectInstance | None:
        """Return the root node when it describes an object.

        Non-object roots are reached through the typed `as_*` accessors.
        """
        return self.as_object()

    def properties(self) -> Mapping[str, Property] | None:
        specification = self.specification()
        return specification.properties if specification is not None else None

    def required_properties(self) -> tuple[str, ...] | None:
        specification = self.specification()
        return specification.required if specification is not None else None

    def as_null(self) -> NullInstance | None:
        return self._root_as(NullInstance)

    def as_boolean(self) -> BooleanInstance | None:
        return self._root_as(BooleanInstance)

    def as_integer(self) -> IntegerInstance | None:
        return self._root_as(IntegerInstance)

    def as_number(self) -> NumberInstance | None:
        return self._root_as(NumberInstance)

    def as_string(self) -> StringInstance | None:
        return self._root_as(StringInstance)

    def as_object(self) -> ObjectInstance | None:
        return self._root_as(ObjectInstance)

    def as_array(self) -> ArrayInstance | None:
        return self._root_as(ArrayInstance)

    def resolve(
        self, reference: RefProperty | str, *, settings: ValidatorSettings | None = None
    ) -> PropertyInstance | None:
        """Dereference a `#/...` pointer against this document."""
        effective = settings or ValidatorSettings()
        return resolve_reference(reference, self.root, max_depth=effective.max_reference_depth)

    def validate(
        self, value: Any, *, settings: ValidatorSettings | None = None
    ) -> ValidationReport:
        """Match a JSON value against this schema and collect every mismatch."""
        return validate_schema(self.root, value, settings=settings)

    def to_json(self) -> Any:
        """Return the JSON value this schema serializes to."""
        return encode_schema_root(self.root)

    def to_json_text(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_json(), indent=indent, ensure_ascii=False)

    def _root_as(self, node_type: type[_InstanceT]) -> _InstanceT | None:
        node = self.root_node()
        return node if isinstance(node, node_type) else None
