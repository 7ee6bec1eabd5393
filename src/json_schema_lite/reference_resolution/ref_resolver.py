"""Intra-document `$ref` resolution.

A reference such as `#/properties/address/properties/street` is interpreted
as a walk over the schema tree. The walk keeps a current position (the whole
document, a map of named nodes, a single node, or a concrete instance) and
each segment moves it according to the kind of position it is applied to.
Targets that are themselves references are followed until a concrete
instance is reached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import unquote

from json_schema_lite.configuration.runtime_settings import DEFAULT_MAX_REFERENCE_DEPTH
from json_schema_lite.schema_identifiers import unescape_pointer_token
from json_schema_lite.schema_model import (
    ArrayInstance,
    ObjectInstance,
    Property,
    PropertyInstance,
    RefProperty,
    SchemaDefinition,
    SchemaRoot,
)

logger = logging.getLogger(__name__)

LOCAL_REFERENCE_PREFIX = "#/"


class UnresolvedReferenceError(LookupError):
    """Raised when a `$ref` cannot be followed to a concrete instance."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"cannot resolve {reference!r}: {reason}")
        self.reference = reference
        self.reason = reason


@dataclass(frozen=True)
class _DocumentPosition:
    definition: SchemaDefinition


@dataclass(frozen=True)
class _PropertyMapPosition:
    properties: Mapping[str, Property]


@dataclass(frozen=True)
class _DefinitionMapPosition:
    definitions: Mapping[str, SchemaDefinition]


@dataclass(frozen=True)
class _PropertyPosition:
    node: Property


@dataclass(frozen=True)
class _InstancePosition:
    node: PropertyInstance


_Position = (
    _DocumentPosition
    | _PropertyMapPosition
    | _DefinitionMapPosition
    | _PropertyPosition
    | _InstancePosition
)


def resolve_reference(
    reference: RefProperty | str,
    root: SchemaRoot,
    *,
    max_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
) -> PropertyInstance | None:
    """Return the instance a reference designates.

    None means the reference cannot be followed or ends on a definition
    without a type description.
    """
    try:
        return dereference(reference, root, max_depth=max_depth)
    except UnresolvedReferenceError as exc:
        logger.debug("%s", exc)
        return None


def dereference(
    reference: RefProperty | str,
    root: SchemaRoot,
    *,
    max_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
) -> PropertyInstance | None:
    """Follow a reference chain to a concrete instance.

    Returns None when the chain ends on a definition without a type
    description; such a definition accepts every instance.

    Raises:
      UnresolvedReferenceError: If the pointer is not local, a segment does
        not apply to the position it reaches, the chain revisits a
        reference, or the chain is longer than `max_depth`.
    """
    current = reference.reference if isinstance(reference, RefProperty) else reference
    visited: list[str] = []
    while True:
        if current in visited:
            chain = " -> ".join([*visited, current])
            logger.warning("Reference cycle detected: %s", chain)
            raise UnresolvedReferenceError(current, f"reference cycle {chain}")
        if len(visited) >= max_depth:
            logger.warning("Reference chain exceeds %d hops at %s", max_depth, current)
            raise UnresolvedReferenceError(current, f"chain longer than {max_depth} references")
        visited.append(current)

        target = _walk(current, root)
        if isinstance(target, RefProperty):
            current = target.reference
            continue
        if isinstance(target, SchemaDefinition):
            return None
        return target


def reference_segments(reference: str) -> tuple[str, ...]:
    """Split a local reference into unescaped path segments."""
    if not reference.startswith(LOCAL_REFERENCE_PREFIX):
        raise UnresolvedReferenceError(
            reference, "only '#/' document-local references are supported"
        )
    remainder = reference[len(LOCAL_REFERENCE_PREFIX) :]
    return tuple(unescape_pointer_token(unquote(segment)) for segment in remainder.split("/"))


def _walk(reference: str, root: SchemaRoot) -> Property | SchemaDefinition:
    segments = reference_segments(reference)
    if isinstance(root, bool):
        raise UnresolvedReferenceError(reference, "boolean schemas have no sub-schemas")

    position: _Position = _DocumentPosition(root)
    for segment in segments:
        next_position = _step(position, segment)
        if next_position is None:
            raise UnresolvedReferenceError(reference, f"segment {segment!r} does not apply")
        position = next_position

    target = _target_of(position)
    if target is None:
        raise UnresolvedReferenceError(reference, "path does not end on a schema node")
    return target


def _step(position: _Position, segment: str) -> _Position | None:
    if isinstance(position, _DefinitionMapPosition):
        definition = position.definitions.get(segment)
        return _DocumentPosition(definition) if definition is not None else None
    if segment == "properties":
        return _step_properties(position)
    if segment == "items":
        return _step_items(position)
    if segment == "definitions" and isinstance(position, _DocumentPosition):
        definitions = position.definition.definitions
        return _DefinitionMapPosition(definitions) if definitions is not None else None
    if isinstance(position, _PropertyMapPosition):
        node = position.properties.get(segment)
        return _PropertyPosition(node) if node is not None else None
    return None


def _step_properties(position: _Position) -> _Position | None:
    if isinstance(position, _DocumentPosition):
        node: Property | None = position.definition.specification
    elif isinstance(position, _PropertyMapPosition):
        node = position.properties.get("properties")
    elif isinstance(position, (_PropertyPosition, _InstancePosition)):
        node = position.node
    else:
        node = None
    if isinstance(node, ObjectInstance):
        return _PropertyMapPosition(node.properties)
    return None


def _step_items(position: _Position) -> _Position | None:
    if isinstance(position, _DocumentPosition):
        node: Property | None = position.definition.specification
    elif isinstance(position, (_PropertyPosition, _InstancePosition)):
        node = position.node
    else:
        node = None
    if isinstance(node, ArrayInstance):
        return _InstancePosition(node.items)
    return None


def _target_of(position: _Position) -> Property | SchemaDefinition | None:
    if isinstance(position, (_PropertyPosition, _InstancePosition)):
        return position.node
    if isinstance(position, _DocumentPosition):
        specification = position.definition.specification
        return specification if specification is not None else position.definition
    return None
