"""OpenAPI document rendering to YAML or JSON text."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml


class OutputFormat(str, Enum):
    """Supported text formats for a rendered document."""

    YAML = "yaml"
    JSON = "json"


class _PlainSafeDumper(yaml.SafeDumper):
    """Safe dumper that writes repeated objects out instead of as aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def render_openapi_document(
    document: Mapping[str, Any], output_format: OutputFormat | str = OutputFormat.YAML
) -> str:
    """Render the document keeping key insertion order."""
    resolved_format = OutputFormat(output_format)
    if resolved_format is OutputFormat.JSON:
        return json.dumps(document, indent=2) + "\n"
    return yaml.dump(
        dict(document),
        Dumper=_PlainSafeDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_openapi_document(
    document: Mapping[str, Any],
    output_path: Path | str,
    output_format: OutputFormat | str = OutputFormat.YAML,
) -> Path:
    """Write the rendered document and return the resolved destination.

    Raises:
      OSError: If writing the file fails.
    """
    destination = Path(output_path)
    destination.write_text(render_openapi_document(document, output_format), encoding="utf-8")
    return destination.resolve()
