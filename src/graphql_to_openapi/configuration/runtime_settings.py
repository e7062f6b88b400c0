"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from graphql_to_openapi.schema_output import OutputFormat

DEFAULT_UNKNOWN_SCALAR_FALLBACK: Mapping[str, object] = MappingProxyType({"type": "string"})


@dataclass(frozen=True)
class OutputSettings:
    """How converted documents are rendered."""

    output_format: OutputFormat = OutputFormat.YAML


@dataclass(frozen=True)
class UnknownScalarSettings:
    """Fragments substituted for scalars outside the built-in set."""

    fallback: Mapping[str, object] | None = field(
        default_factory=lambda: DEFAULT_UNKNOWN_SCALAR_FALLBACK
    )
    overrides: Mapping[str, Mapping[str, object]] = field(default_factory=dict)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    output: OutputSettings = field(default_factory=OutputSettings)
    unknown_scalars: UnknownScalarSettings = field(default_factory=UnknownScalarSettings)
