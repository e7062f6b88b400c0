"""Mapping of selected output fields to OpenAPI property fragments."""

from __future__ import annotations

from graphql import GraphQLField, get_named_type, is_leaf_type

from .input_type_mapper import UnknownScalarHook, map_input_type
from .openapi_fragments import Fragment, empty_object_fragment, finish_fragment
from .scalar_type_table import lookup_type_signature, split_non_null_marker


def map_output_field(
    field_def: GraphQLField, *, on_unknown_scalar: UnknownScalarHook | None = None
) -> Fragment:
    """Return the fragment a selected field contributes to its parent.

    Scalar shapes come from the signature table; other leaves (enums, nested
    scalar lists, custom scalars) from the wrapper-driven input mapping.
    Object and list-of-object fields get empty ``properties`` that the
    document visitor fills while descending into the sub-selection.
    """
    signature, nullable = split_non_null_marker(str(field_def.type))
    fragment = lookup_type_signature(signature)
    if fragment is None:
        if is_leaf_type(get_named_type(field_def.type)):
            fragment = map_input_type(field_def.type, on_unknown_scalar=on_unknown_scalar)
        elif signature.startswith("["):
            fragment = {"type": "array", "items": empty_object_fragment()}
        else:
            fragment = empty_object_fragment()
    return finish_fragment(fragment, nullable=nullable, description=field_def.description)
