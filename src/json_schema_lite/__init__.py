"""Parse draft-07 JSON Schema documents and validate JSON instances against them."""

import logging

from .configuration import UnsupportedKeywordPolicy, ValidatorSettings
from .instance_validation import (
    SchemaMismatch,
    SchemaMismatchKind,
    ValidationReport,
    validate_instance,
)
from .reference_resolution import UnresolvedReferenceError, resolve_reference
from .schema_document import Schema
from .schema_identifiers import (
    FragmentId,
    InvalidSchemaIdError,
    JsonPointerId,
    PathId,
    SchemaId,
    UrlId,
    parse_schema_id,
)
from .schema_model import (
    ArrayInstance,
    BooleanInstance,
    IntegerInstance,
    NullInstance,
    NumberCriteria,
    NumberInstance,
    ObjectInstance,
    Property,
    PropertyInstance,
    RefProperty,
    SchemaDefinition,
    SchemaParseError,
    StringInstance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Schema",
    "SchemaDefinition",
    "SchemaParseError",
    "SchemaId",
    "FragmentId",
    "UrlId",
    "JsonPointerId",
    "PathId",
    "InvalidSchemaIdError",
    "parse_schema_id",
    "Property",
    "PropertyInstance",
    "RefProperty",
    "NullInstance",
    "BooleanInstance",
    "IntegerInstance",
    "NumberInstance",
    "StringInstance",
    "ArrayInstance",
    "ObjectInstance",
    "NumberCriteria",
    "SchemaMismatch",
    "SchemaMismatchKind",
    "ValidationReport",
    "validate_instance",
    "UnresolvedReferenceError",
    "resolve_reference",
    "ValidatorSettings",
    "UnsupportedKeywordPolicy",
]
