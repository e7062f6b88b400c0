"""Recursive mapping of GraphQL input types to OpenAPI schema fragments."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLType,
)

from .mapping_faults import DepthLimitExceededError, UnknownScalarError
from .openapi_fragments import Fragment, finish_fragment
from .scalar_type_table import BUILTIN_SCALAR_TYPES

MAX_TYPE_DEPTH = 50

UnknownScalarHook = Callable[[GraphQLScalarType], Mapping[str, Any]]


def map_input_type(
    type_ref: GraphQLType,
    depth: int = 0,
    *,
    on_unknown_scalar: UnknownScalarHook | None = None,
) -> Fragment:
    """Map an input type reference to a fragment with explicit nullability.

    Every fragment is nullable unless its reference is wrapped in
    ``GraphQLNonNull``. Enum and scalar leaves are handled the same way for
    output fields, so this also serves leaf output types.

    Raises:
      DepthLimitExceededError: If nesting goes beyond ``MAX_TYPE_DEPTH``.
      UnknownScalarError: For a custom scalar without ``on_unknown_scalar``.
    """
    if depth > MAX_TYPE_DEPTH:
        raise DepthLimitExceededError(f"depth limit exceeded: {depth}")

    if isinstance(type_ref, GraphQLNonNull):
        inner = map_input_type(type_ref.of_type, depth + 1, on_unknown_scalar=on_unknown_scalar)
        return finish_fragment(inner, nullable=False, description=None)

    if isinstance(type_ref, GraphQLList):
        items = map_input_type(type_ref.of_type, depth + 1, on_unknown_scalar=on_unknown_scalar)
        return {"type": "array", "nullable": True, "items": items}

    if isinstance(type_ref, GraphQLInputObjectType):
        properties: dict[str, Fragment] = {}
        for field_name, field in type_ref.fields.items():
            field_fragment = map_input_type(
                field.type, depth + 1, on_unknown_scalar=on_unknown_scalar
            )
            properties[field_name] = finish_fragment(
                field_fragment,
                nullable=field_fragment["nullable"],
                description=field.description,
            )
        fragment: Fragment = {"type": "object", "properties": properties}
        return finish_fragment(fragment, nullable=True, description=type_ref.description)

    if isinstance(type_ref, GraphQLEnumType):
        fragment = {"type": "string", "enum": list(type_ref.values)}
        return finish_fragment(fragment, nullable=True, description=type_ref.description)

    if isinstance(type_ref, GraphQLScalarType):
        return map_scalar_type(type_ref, on_unknown_scalar=on_unknown_scalar)

    raise TypeError(f"Unexpected input type: {type_ref}")


def map_scalar_type(
    scalar_type: GraphQLScalarType, *, on_unknown_scalar: UnknownScalarHook | None = None
) -> Fragment:
    """Map a scalar to a nullable primitive fragment."""
    openapi_type = BUILTIN_SCALAR_TYPES.get(scalar_type.name)
    if openapi_type is not None:
        return {"type": openapi_type, "nullable": True}
    if on_unknown_scalar is None:
        raise UnknownScalarError(f"Unknown scalar: {scalar_type.name}")
    supplied = copy.deepcopy(dict(on_unknown_scalar(scalar_type)))
    if not isinstance(supplied.get("type"), str):
        raise UnknownScalarError(
            f"Fallback fragment for scalar {scalar_type.name} must define a string 'type'."
        )
    return finish_fragment(supplied, nullable=True, description=None)
