"""Schema definition entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from json_schema_lite.schema_identifiers import SchemaId

from .schema_nodes import Property, frozen_mapping


@dataclass(frozen=True)
class SchemaDefinition:  # pylint: disable=too-many-instance-attributes
    """Object-form schema document or named sub-schema.

    `specification` holds the root-level type description (`type`,
    `properties`, `items`, ...) that sits flattened next to the document
    keywords in JSON.
    """

    id: SchemaId | None = None
    dialect: str | None = None
    description: str | None = None
    dependencies: Mapping[str, tuple[str, ...]] | None = None
    specification: Property | None = None
    definitions: Mapping[str, SchemaDefinition] | None = None

    def __post_init__(self) -> None:
        if self.dependencies is not None:
            dependencies = {name: tuple(names) for name, names in self.dependencies.items()}
            object.__setattr__(self, "dependencies", frozen_mapping(dependencies))
        if self.definitions is not None:
            object.__setattr__(self, "definitions", frozen_mapping(self.definitions))


SchemaRoot = SchemaDefinition | bool
