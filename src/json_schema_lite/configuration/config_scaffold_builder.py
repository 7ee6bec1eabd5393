"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "json-schema-lite.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Validator configuration template for json-schema-lite.
# Every setting is optional; remove a line to keep its default.

validation:
  # Maximum number of chained $ref hops followed before giving up.
  max_reference_depth: 32
  # What to do with oneOf/anyOf/allOf/not, additionalProperties,
  # patternProperties, format, pattern and enum: "report" or "ignore".
  unsupported_keywords: "report"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML validator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
