"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    DEFAULT_MAX_REFERENCE_DEPTH,
    Configuration,
    UnsupportedKeywordPolicy,
    ValidatorSettings,
)

__all__ = [
    "Configuration",
    "ValidatorSettings",
    "UnsupportedKeywordPolicy",
    "DEFAULT_MAX_REFERENCE_DEPTH",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
