"""Schema node entities.

A schema node is either a concrete `PropertyInstance` describing the shape of
one JSON value, or a `RefProperty` pointing at another node of the same
document. Nodes are immutable and own their children; `$ref` strings are the
only relation between separate branches of the tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, TypeAlias

UNSUPPORTED_KEYWORDS: tuple[str, ...] = (
    "oneOf",
    "anyOf",
    "allOf",
    "not",
    "additionalProperties",
    "patternProperties",
    "format",
    "pattern",
    "enum",
)


def freeze_json(value: Any) -> Any:
    """Return a read-only copy of a JSON value.

    Objects become mapping proxies and arrays become tuples.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_json(member) for key, member in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(element) for element in value)
    return value


def frozen_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy a mapping of already immutable values into a read-only view."""
    return MappingProxyType(dict(value))


class InstanceType(str, Enum):
    """Instance data model type names used as the `type` discriminator."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class NumberCriteria:
    """Numeric constraints carried by integer and number nodes.

    Values are kept as opaque JSON and are not enforced during validation.
    """

    exclusive_minimum: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclusive_minimum", freeze_json(self.exclusive_minimum))


@dataclass(frozen=True)
class PropertyInstance:
    """Concrete description of one JSON value shape."""

    instance_type: ClassVar[InstanceType]

    unsupported: Mapping[str, Any] = field(default_factory=dict, kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "unsupported", freeze_json(self.unsupported))


@dataclass(frozen=True)
class NullInstance(PropertyInstance):
    """Matches JSON null."""

    instance_type: ClassVar[InstanceType] = InstanceType.NULL


@dataclass(frozen=True)
class BooleanInstance(PropertyInstance):
    """Matches JSON true and false."""

    instance_type: ClassVar[InstanceType] = InstanceType.BOOLEAN


@dataclass(frozen=True)
class StringInstance(PropertyInstance):
    """Matches JSON strings."""

    instance_type: ClassVar[InstanceType] = InstanceType.STRING


@dataclass(frozen=True)
class IntegerInstance(PropertyInstance):
    """Matches JSON numbers without a fractional component."""

    instance_type: ClassVar[InstanceType] = InstanceType.INTEGER

    criteria: NumberCriteria = field(default_factory=NumberCriteria)


@dataclass(frozen=True)
class NumberInstance(PropertyInstance):
    """Matches any JSON number."""

    instance_type: ClassVar[InstanceType] = InstanceType.NUMBER

    criteria: NumberCriteria = field(default_factory=NumberCriteria)


@dataclass(frozen=True)
class ArrayInstance(PropertyInstance):
    """Matches JSON arrays whose elements all match `items`."""

    instance_type: ClassVar[InstanceType] = InstanceType.ARRAY

    items: PropertyInstance


@dataclass(frozen=True)
class ObjectInstance(PropertyInstance):
    """Matches JSON objects against declared properties.

    Keys missing from `properties` are accepted without checks. `required`
    is not cross-checked against `properties` at parse time.
    """

    instance_type: ClassVar[InstanceType] = InstanceType.OBJECT

    properties: Mapping[str, Property] = field(default_factory=dict)
    required: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "properties", frozen_mapping(self.properties))
        if self.required is not None:
            object.__setattr__(self, "required", tuple(self.required))


@dataclass(frozen=True)
class RefProperty:
    """Intra-document `$ref` pointer, re-resolved each time it is followed."""

    reference: str


Property: TypeAlias = PropertyInstance | RefProperty
