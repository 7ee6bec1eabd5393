"""Instance validation exports."""

from .node_validator import FALSE_SCHEMA_MESSAGE, validate_instance, validate_schema
from .validation_outcomes import SchemaMismatch, SchemaMismatchKind, ValidationReport
from .value_rendering import describe_json_value

__all__ = [
    "FALSE_SCHEMA_MESSAGE",
    "SchemaMismatch",
    "SchemaMismatchKind",
    "ValidationReport",
    "describe_json_value",
    "validate_instance",
    "validate_schema",
]
