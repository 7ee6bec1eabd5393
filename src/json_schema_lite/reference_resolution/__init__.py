"""Reference resolution exports."""

from .ref_resolver import (
    DEFAULT_MAX_REFERENCE_DEPTH,
    LOCAL_REFERENCE_PREFIX,
    UnresolvedReferenceError,
    dereference,
    reference_segments,
    resolve_reference,
)

__all__ = [
    "DEFAULT_MAX_REFERENCE_DEPTH",
    "LOCAL_REFERENCE_PREFIX",
    "UnresolvedReferenceError",
    "dereference",
    "reference_segments",
    "resolve_reference",
]
