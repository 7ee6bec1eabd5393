"""Structural validation of JSON instances against schema nodes."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from json_schema_lite.configuration.runtime_settings import (
    UnsupportedKeywordPolicy,
    ValidatorSettings,
)
from json_schema_lite.reference_resolution import UnresolvedReferenceError, dereference
from json_schema_lite.schema_identifiers import escape_pointer_token
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
    SchemaRoot,
    StringInstance,
)

from .validation_outcomes import SchemaMismatch, SchemaMismatchKind, ValidationReport
from .value_rendering import describe_json_value

logger = logging.getLogger(__name__)

FALSE_SCHEMA_MESSAGE = 'the schema "false" will never validate'
ROOT_SCHEMA_LOCATION = "#"


@dataclass(frozen=True)
class _ValidationContext:
    """Context shared by every recursive validation step.

    `notices` collects unsupported-keyword notices keyed by schema location
    and keyword, so a node reached many times is reported once.
    """

    root: SchemaRoot | None
    settings: ValidatorSettings
    notices: dict[tuple[str, str], SchemaMismatch] = field(default_factory=dict)

    def report(self, mismatches: list[SchemaMismatch]) -> ValidationReport:
        return ValidationReport(tuple(mismatches), tuple(self.notices.values()))


def validate_schema(
    root: SchemaRoot, value: Any, *, settings: ValidatorSettings | None = None
) -> ValidationReport:
    """Validate an instance against a whole schema document."""
    if root is True:
        logger.info('Schema is "true"; every instance is accepted.')
        return ValidationReport()
    if root is False:
        return ValidationReport(
            (
                SchemaMismatch(
                    kind=SchemaMismatchKind.FALSE_SCHEMA,
                    message=FALSE_SCHEMA_MESSAGE,
                    actual=value,
                ),
            )
        )
    if root.specification is None:
        return ValidationReport()

    context = _ValidationContext(root=root, settings=settings or ValidatorSettings())
    return context.report(
        _validate_property(root.specification, value, "", ROOT_SCHEMA_LOCATION, context)
    )


def validate_instance(
    node: PropertyInstance,
    value: Any,
    *,
    root: SchemaRoot | None = None,
    settings: ValidatorSettings | None = None,
) -> ValidationReport:
    """Validate an instance against one schema node.

    `root` is the document `$ref` pointers found below `node` are resolved
    against; without it every reference is reported as unresolved.
    """
    context = _ValidationContext(root=root, settings=settings or ValidatorSettings())
    return context.report(_validate_node(node, value, "", ROOT_SCHEMA_LOCATION, context))


def _validate_property(
    node: Property,
    value: Any,
    location: str,
    schema_location: str,
    context: _ValidationContext,
) -> list[SchemaMismatch]:
    if isinstance(node, RefProperty):
        return _validate_reference(node, value, location, context)
    return _validate_node(node, value, location, schema_location, context)


def _validate_reference(
    node: RefProperty, value: Any, location: str, context: _ValidationContext
) -> list[SchemaMismatch]:
    if context.root is None:
        reason = f"cannot resolve {node.reference!r}: no root document"
    else:
        try:
            target = dereference(
                node, context.root, max_depth=context.settings.max_reference_depth
            )
        except UnresolvedReferenceError as exc:
            reason = str(exc)
        else:
            if target is None:
                return []
            return _validate_node(target, value, location, node.reference, context)
    return [
        SchemaMismatch(
            kind=SchemaMismatchKind.UNRESOLVED_REFERENCE,
            message=reason,
            location=location,
            expected=node.reference,
            actual=value,
        )
    ]


def _validate_node(
    node: PropertyInstance,
    value: Any,
    location: str,
    schema_location: str,
    context: _ValidationContext,
) -> list[SchemaMismatch]:
    if isinstance(node, ArrayInstance):
        mismatches = _validate_array(node, value, location, schema_location, context)
    elif isinstance(node, ObjectInstance):
        mismatches = _validate_object(node, value, location, schema_location, context)
    elif _matches_scalar(node, value):
        mismatches = []
    else:
        mismatches = [_type_mismatch(node.instance_type.value, value, location)]

    policy = context.settings.unsupported_keywords
    if node.unsupported and policy is UnsupportedKeywordPolicy.REPORT:
        _note_unsupported_keywords(node, schema_location, context)
    return mismatches


def _matches_scalar(node: PropertyInstance, value: Any) -> bool:
    if isinstance(node, NullInstance):
        return value is None
    if isinstance(node, BooleanInstance):
        return isinstance(value, bool)
    if isinstance(node, StringInstance):
        return isinstance(value, str)
    if isinstance(node, NumberInstance):
        return _is_number(value)
    if isinstance(node, IntegerInstance):
        return _is_integral(value)
    return False


def _validate_array(
    node: ArrayInstance,
    value: Any,
    location: str,
    schema_location: str,
    context: _ValidationContext,
) -> list[SchemaMismatch]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return [_type_mismatch("array", value, location)]
    items_location = f"{schema_location}/items"
    mismatches: list[SchemaMismatch] = []
    for index, element in enumerate(value):
        mismatches.extend(
            _validate_node(node.items, element, f"{location}/{index}", items_location, context)
        )
    return mismatches


def _validate_object(
    node: ObjectInstance,
    value: Any,
    location: str,
    schema_location: str,
    context: _ValidationContext,
) -> list[SchemaMismatch]:
    if not isinstance(value, Mapping):
        return [
            SchemaMismatch(
                kind=SchemaMismatchKind.TYPE_MISMATCH,
                message="invalid object",
                location=location,
                expected="object",
                actual=value,
            )
        ]
    required = node.required or ()
    mismatches: list[SchemaMismatch] = []
    for name, child in node.properties.items():
        token = escape_pointer_token(name)
        if name in value:
            mismatches.extend(
                _validate_property(
                    child,
                    value[name],
                    f"{location}/{token}",
                    f"{schema_location}/properties/{token}",
                    context,
                )
            )
        elif name in required:
            mismatches.append(
                SchemaMismatch(
                    kind=SchemaMismatchKind.MISSING_REQUIRED,
                    message=(
                        "object doesn't contain the required property "
                        f"{json.dumps(name, ensure_ascii=False)}"
                    ),
                    location=location,
                    expected=name,
                )
            )
    return mismatches


def _note_unsupported_keywords(
    node: PropertyInstance, schema_location: str, context: _ValidationContext
) -> None:
    for keyword in node.unsupported:
        key = (schema_location, keyword)
        if key in context.notices:
            continue
        context.notices[key] = SchemaMismatch(
            kind=SchemaMismatchKind.UNSUPPORTED_FEATURE,
            message=f"keyword {keyword!r} is not supported and was not evaluated",
            location=schema_location,
            expected=keyword,
        )


def _type_mismatch(expected: str, value: Any, location: str) -> SchemaMismatch:
    return SchemaMismatch(
        kind=SchemaMismatchKind.TYPE_MISMATCH,
        message=f"expected {expected} found {describe_json_value(value)}",
        location=location,
        expected=expected,
        actual=value,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return _is_number(value)
