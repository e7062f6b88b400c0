"""Scalar and scalar-list signature lookup."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType

from .openapi_fragments import Fragment

BUILTIN_SCALAR_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "ID": "string",
        "String": "string",
        "Int": "integer",
        "Float": "number",
        "Boolean": "boolean",
    }
)


def _build_type_table() -> dict[str, Fragment]:
    table: dict[str, Fragment] = {}
    for scalar_name, openapi_type in BUILTIN_SCALAR_TYPES.items():
        table[scalar_name] = {"type": openapi_type}
        table[f"[{scalar_name}]"] = {
            "type": "array",
            "items": {"type": openapi_type, "nullable": True},
        }
        table[f"[{scalar_name}!]"] = {
            "type": "array",
            "items": {"type": openapi_type, "nullable": False},
        }
    return table


SCALAR_LIST_TYPE_TABLE: Mapping[str, Fragment] = MappingProxyType(_build_type_table())


def split_non_null_marker(signature: str) -> tuple[str, bool]:
    """Strip one trailing non-null marker and return ``(signature, nullable)``."""
    if signature.endswith("!"):
        return signature[:-1], False
    return signature, True


def lookup_type_signature(signature: str) -> Fragment | None:
    """Return a fresh copy of the table entry for an exact signature, if any."""
    entry = SCALAR_LIST_TYPE_TABLE.get(signature)
    if entry is None:
        return None
    return copy.deepcopy(entry)
