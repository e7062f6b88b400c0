"""OpenAPI (Swagger 2.0) document skeleton builders."""

from __future__ import annotations

from typing import Any

from graphql_to_openapi.type_mapping.openapi_fragments import Fragment

SWAGGER_VERSION = "2.0"
JSON_MEDIA_TYPE = "application/json"
SUCCESS_STATUS = "200"

_PARAMETER_SCHEMA_KEYS = ("items", "properties", "enum")


def new_openapi_document() -> dict[str, Any]:
    """Return an OpenAPI document without paths."""
    return {
        "swagger": SWAGGER_VERSION,
        "schemes": ["http", "https"],
        "consumes": [JSON_MEDIA_TYPE],
        "produces": [JSON_MEDIA_TYPE],
        "paths": {},
    }


def new_get_operation(response_schema: Fragment) -> dict[str, Any]:
    """Return a path item holding one GET operation around ``response_schema``."""
    return {
        "get": {
            "parameters": [],
            "responses": {
                SUCCESS_STATUS: {
                    "description": "response",
                    "schema": response_schema,
                },
            },
            "produces": [JSON_MEDIA_TYPE],
        },
    }


def build_query_parameter(name: str, fragment: Fragment) -> dict[str, Any]:
    """Describe one variable as a query parameter."""
    parameter: dict[str, Any] = {
        "name": name,
        "in": "query",
        "required": not fragment["nullable"],
        "type": fragment["type"],
    }
    for key in _PARAMETER_SCHEMA_KEYS:
        if key in fragment:
            parameter[key] = fragment[key]
    if fragment.get("description") is not None:
        parameter["description"] = fragment["description"]
    return parameter
