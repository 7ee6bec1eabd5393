"""Schema model exports."""

from .node_codec import (
    SchemaParseError,
    decode_definition,
    decode_property,
    decode_schema_root,
    encode_definition,
    encode_property,
    encode_schema_root,
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

__all__ = [
    "UNSUPPORTED_KEYWORDS",
    "InstanceType",
    "NumberCriteria",
    "PropertyInstance",
    "NullInstance",
    "BooleanInstance",
    "IntegerInstance",
    "NumberInstance",
    "StringInstance",
    "ArrayInstance",
    "ObjectInstance",
    "RefProperty",
    "Property",
    "SchemaDefinition",
    "SchemaRoot",
    "SchemaParseError",
    "decode_schema_root",
    "decode_definition",
    "decode_property",
    "encode_schema_root",
    "encode_definition",
    "encode_property",
]
