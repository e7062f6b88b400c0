"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_UNKNOWN_SCALAR_FALLBACK,
    Configuration,
    OutputSettings,
    UnknownScalarSettings,
)
from .unknown_scalar_policy import build_unknown_scalar_hook

__all__ = [
    "Configuration",
    "OutputSettings",
    "UnknownScalarSettings",
    "DEFAULT_UNKNOWN_SCALAR_FALLBACK",
    "ConfigurationError",
    "load_configuration",
    "build_unknown_scalar_hook",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
