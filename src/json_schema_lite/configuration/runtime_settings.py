"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_MAX_REFERENCE_DEPTH = 32


class UnsupportedKeywordPolicy(str, Enum):
    """How validation treats draft-07 keywords this library does not evaluate."""

    REPORT = "report"
    IGNORE = "ignore"


@dataclass(frozen=True)
class ValidatorSettings:
    """Tunables applied while validating instances."""

    max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH
    unsupported_keywords: UnsupportedKeywordPolicy = UnsupportedKeywordPolicy.REPORT


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    validation: ValidatorSettings
