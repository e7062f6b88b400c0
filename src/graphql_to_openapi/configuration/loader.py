"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from graphql_to_openapi.schema_output import OutputFormat

from .runtime_settings import (
    DEFAULT_UNKNOWN_SCALAR_FALLBACK,
    Configuration,
    OutputSettings,
    UnknownScalarSettings,
)

_LOGGER = logging.getLogger(__name__)

OPENAPI_FRAGMENT_TYPES = frozenset({"string", "integer", "number", "boolean", "object", "array"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    configuration = Configuration(
        path=path,
        output=_parse_output_section(parsed.get("output")),
        unknown_scalars=_parse_unknown_scalars_section(parsed.get("unknown_scalars")),
    )
    _LOGGER.debug("Loaded configuration from %s", path)
    return configuration


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    raw_format = section.get("format", OutputFormat.YAML.value)
    if not isinstance(raw_format, str):
        raise ConfigurationError("output.format must be a string.")
    try:
        output_format = OutputFormat(raw_format.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in OutputFormat)
        raise ConfigurationError(f"output.format must be one of: {allowed}.") from exc
    return OutputSettings(output_format=output_format)


def _parse_unknown_scalars_section(value: Any) -> UnknownScalarSettings:
    section = _optional_mapping(value, "unknown_scalars")
    if "fallback" in section:
        raw_fallback = section["fallback"]
        fallback = (
            None
            if raw_fallback is None
            else _require_fragment(raw_fallback, "unknown_scalars.fallback")
        )
    else:
        fallback = DEFAULT_UNKNOWN_SCALAR_FALLBACK

    raw_overrides = section.get("overrides") or {}
    if not isinstance(raw_overrides, Mapping):
        raise ConfigurationError("unknown_scalars.overrides must be a mapping.")
    overrides: dict[str, Mapping[str, object]] = {}
    for scalar_name, fragment in raw_overrides.items():
        if not isinstance(scalar_name, str) or not scalar_name.strip():
            raise ConfigurationError("unknown_scalars.overrides keys must be scalar names.")
        overrides[scalar_name.strip()] = _require_fragment(
            fragment, f"unknown_scalars.overrides.{scalar_name}"
        )
    return UnknownScalarSettings(fallback=fallback, overrides=overrides)


def _require_fragment(value: Any, field_name: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{field_name} must be a mapping.")
    fragment_type = value.get("type")
    if not isinstance(fragment_type, str):
        raise ConfigurationError(f"{field_name}.type must be a string.")
    if fragment_type not in OPENAPI_FRAGMENT_TYPES:
        allowed = ", ".join(sorted(OPENAPI_FRAGMENT_TYPES))
        raise ConfigurationError(f"{field_name}.type must be one of: {allowed}.")
    return dict(value)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value
