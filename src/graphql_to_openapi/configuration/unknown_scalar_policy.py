"""Unknown scalar hook built from configuration."""

from __future__ import annotations

from collections.abc import Mapping

from graphql import GraphQLScalarType

from graphql_to_openapi.type_mapping import UnknownScalarError, UnknownScalarHook

from .runtime_settings import UnknownScalarSettings


def build_unknown_scalar_hook(settings: UnknownScalarSettings) -> UnknownScalarHook | None:
    """Return a hook resolving per-scalar overrides, then the fallback.

    Returns None when nothing is configured, leaving unknown scalars fatal.
    """
    if settings.fallback is None and not settings.overrides:
        return None

    def on_unknown_scalar(scalar_type: GraphQLScalarType) -> Mapping[str, object]:
        override = settings.overrides.get(scalar_type.name)
        if override is not None:
            return override
        if settings.fallback is not None:
            return settings.fallback
        raise UnknownScalarError(f"No fragment configured for scalar {scalar_type.name}.")

    return on_unknown_scalar
