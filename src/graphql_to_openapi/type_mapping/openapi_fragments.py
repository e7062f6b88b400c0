"""OpenAPI schema fragment helpers."""

from __future__ import annotations

from typing import Any

Fragment = dict[str, Any]

_LEADING_KEYS = frozenset({"type", "nullable", "description"})


def finish_fragment(fragment: Fragment, *, nullable: bool, description: str | None) -> Fragment:
    """Return the fragment with nullability set and keys in a stable order.

    A ``description`` is replaced only when one is given, so a type-level
    description survives a field that carries none.
    """
    rest = {key: value for key, value in fragment.items() if key not in _LEADING_KEYS}
    finished: Fragment = {"type": fragment["type"], "nullable": nullable}
    resolved_description = description if description is not None else fragment.get("description")
    if resolved_description is not None:
        finished["description"] = resolved_description
    finished.update(rest)
    return finished


def empty_object_fragment() -> Fragment:
    return {"type": "object", "properties": {}}


def opens_selection(fragment: Fragment) -> bool:
    """Return True when nested selections must attach into this fragment."""
    if fragment["type"] == "object":
        return True
    items = fragment.get("items")
    return fragment["type"] == "array" and isinstance(items, dict) and items.get("type") == "object"
