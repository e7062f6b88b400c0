"""Type mapping exports."""

from .input_type_mapper import MAX_TYPE_DEPTH, UnknownScalarHook, map_input_type, map_scalar_type
from .mapping_faults import (
    ConversionInvariantError,
    DepthLimitExceededError,
    SelectionStackError,
    UnknownScalarError,
)
from .openapi_fragments import Fragment, opens_selection
from .output_field_mapper import map_output_field
from .scalar_type_table import (
    BUILTIN_SCALAR_TYPES,
    SCALAR_LIST_TYPE_TABLE,
    lookup_type_signature,
    split_non_null_marker,
)

__all__ = [
    "BUILTIN_SCALAR_TYPES",
    "MAX_TYPE_DEPTH",
    "SCALAR_LIST_TYPE_TABLE",
    "ConversionInvariantError",
    "DepthLimitExceededError",
    "Fragment",
    "SelectionStackError",
    "UnknownScalarError",
    "UnknownScalarHook",
    "lookup_type_signature",
    "map_input_type",
    "map_output_field",
    "map_scalar_type",
    "opens_selection",
    "split_non_null_marker",
]
