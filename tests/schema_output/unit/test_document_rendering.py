"""Document rendering tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from graphql_to_openapi.schema_output import (
    OutputFormat,
    render_openapi_document,
    write_openapi_document,
)


def _document() -> dict:
    shared_items = {"type": "string", "nullable": False}
    return {
        "swagger": "2.0",
        "paths": {
            "/names": {
                "get": {
                    "responses": {
                        "200": {
                            "description": "response",
                            "schema": {
                                "type": "object",
                                "properties": {
                                    "first": {"type": "array", "items": shared_items},
                                    "second": {"type": "array", "items": shared_items},
                                },
                            },
                        }
                    }
                }
            }
        },
    }


def test_yaml_rendering_keeps_key_order_and_writes_no_aliases() -> None:
    text = render_openapi_document(_document(), OutputFormat.YAML)

    assert text.startswith("swagger: '2.0'\npaths:\n")
    assert "&id" not in text
    assert "*id" not in text
    assert yaml.safe_load(text) == _document()


def test_json_rendering_is_indented_and_round_trips() -> None:
    text = render_openapi_document(_document(), "json")

    assert text.startswith('{\n  "swagger": "2.0",')
    assert text.endswith("}\n")
    assert json.loads(text) == _document()


def test_yaml_rendering_keeps_non_ascii_descriptions() -> None:
    text = render_openapi_document({"description": "Pokémon"})

    assert "Pokémon" in text


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        render_openapi_document(_document(), "xml")


def test_write_openapi_document_returns_resolved_path(tmp_path: Path) -> None:
    output_path = tmp_path / "openapi.json"

    written = write_openapi_document(_document(), output_path, OutputFormat.JSON)

    assert written == output_path.resolve()
    assert json.loads(output_path.read_text(encoding="utf-8")) == _document()
