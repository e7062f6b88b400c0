"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "graphql-to-openapi.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Conversion configuration for graphql-to-openapi.
# Every section is optional; removed keys fall back to the defaults shown.

output:
  # Rendering of the converted OpenAPI document: yaml or json.
  format: "yaml"

unknown_scalars:
  # Fragment used for any custom scalar without an override.
  # Set to null to make custom scalars a conversion error instead.
  fallback:
    type: "string"
  # Per-scalar fragments, keyed by the scalar name in the schema.
  overrides:
    # DateTime:
    #   type: "string"
    #   format: "date-time"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

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
