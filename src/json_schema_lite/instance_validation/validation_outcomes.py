"""Validation outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SchemaMismatchKind(str, Enum):
    """Reasons an instance fails to match a schema node."""

    TYPE_MISMATCH = "type_mismatch"
    MISSING_REQUIRED = "missing_required"
    FALSE_SCHEMA = "false_schema"
    UNRESOLVED_REFERENCE = "unresolved_reference"
    UNSUPPORTED_FEATURE = "unsupported_feature"


@dataclass(frozen=True)
class SchemaMismatch:
    """One difference between an instance and the schema it was matched against.

    `location` is a JSON pointer into the instance document; the empty string
    addresses the document itself. Unsupported-keyword notices point into the
    schema instead, with a leading `#`.
    """

    kind: SchemaMismatchKind
    message: str
    location: str = ""
    expected: str | None = None
    actual: Any = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationReport:
    """Ordered mismatches collected while validating one instance.

    `notices` lists schema keywords that were not evaluated, once per schema
    node and keyword. They do not make an instance invalid.
    """

    mismatches: tuple[SchemaMismatch, ...] = ()
    notices: tuple[SchemaMismatch, ...] = ()

    @property
    def is_ok(self) -> bool:
        """Return True when no mismatches are present."""
        return not self.mismatches

    @property
    def messages(self) -> tuple[str, ...]:
        """Return the human-readable message of every mismatch."""
        return tuple(mismatch.message for mismatch in self.mismatches)

    def of_kind(self, kind: SchemaMismatchKind) -> tuple[SchemaMismatch, ...]:
        """Return the mismatches and notices of one kind, keeping their order."""
        return tuple(
            mismatch for mismatch in (*self.mismatches, *self.notices) if mismatch.kind is kind
        )
