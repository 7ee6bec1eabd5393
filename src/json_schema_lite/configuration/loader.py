"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_MAX_REFERENCE_DEPTH,
    Configuration,
    UnsupportedKeywordPolicy,
    ValidatorSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Return the configuration used when no file is given."""
    return Configuration(path=None, validation=ValidatorSettings())


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    validation = _parse_validation_section(parsed.get("validation"))
    return Configuration(path=path, validation=validation)


def _parse_validation_section(value: Any) -> ValidatorSettings:
    if value is None:
        return ValidatorSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'validation' must be a mapping.")

    unknown = sorted(set(value) - {"max_reference_depth", "unsupported_keywords"})
    if unknown:
        raise ConfigurationError(f"Unknown validation settings: {', '.join(map(str, unknown))}")

    max_reference_depth = _require_positive_int(
        value.get("max_reference_depth", DEFAULT_MAX_REFERENCE_DEPTH),
        "validation.max_reference_depth",
    )
    unsupported_keywords = _parse_policy(
        value.get("unsupported_keywords", UnsupportedKeywordPolicy.REPORT.value)
    )
    return ValidatorSettings(
        max_reference_depth=max_reference_depth,
        unsupported_keywords=unsupported_keywords,
    )


def _parse_policy(value: Any) -> UnsupportedKeywordPolicy:
    if not isinstance(value, str):
        raise ConfigurationError("validation.unsupported_keywords must be a string.")
    try:
        return UnsupportedKeywordPolicy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in UnsupportedKeywordPolicy)
        raise ConfigurationError(
            f"validation.unsupported_keywords must be one of: {choices}."
        ) from exc


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
