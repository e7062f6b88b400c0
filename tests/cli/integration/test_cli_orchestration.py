"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from graphql_to_openapi.cli import cli, main

_SCHEMA = """
scalar DateTime

type Query {
  query: Query
  arrayOfStrings(input: String!, otherInput: String!): [String!]!
  now: DateTime
}
"""

_QUERY = """
query scalarQuery($input: String!, $otherInput: String!) {
  arrayOfStrings(input: $input, otherInput: $otherInput)
}
"""


def _write_inputs(
    tmp_path: Path, query: str = _QUERY, schema: str = _SCHEMA
) -> tuple[Path, Path]:
    schema_path = tmp_path / "schema.graphql"
    query_path = tmp_path / "query.graphql"
    schema_path.write_text(schema, encoding="utf-8")
    query_path.write_text(query, encoding="utf-8")
    return schema_path, query_path


def test_convert_prints_yaml_by_default(tmp_path: Path) -> None:
    schema_path, query_path = _write_inputs(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["convert", "--schema", str(schema_path), "--query", str(query_path)]
    )

    assert result.exit_code == 0, result.output
    document = yaml.safe_load(result.output)
    assert document["swagger"] == "2.0"
    assert list(document["paths"]) == ["/scalarQuery"]


def test_convert_writes_json_to_output_path(tmp_path: Path) -> None:
    schema_path, query_path = _write_inputs(tmp_path)
    output_path = tmp_path / "openapi.json"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert",
            "--schema",
            str(schema_path),
            "--query",
            str(query_path),
            "--format",
            "json",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    document = json.loads(output_path.read_text(encoding="utf-8"))
    parameters = document["paths"]["/scalarQuery"]["get"]["parameters"]
    assert [parameter["name"] for parameter in parameters] == ["input", "otherInput"]


def test_configuration_format_and_scalar_overrides_apply(tmp_path: Path) -> None:
    schema_path, query_path = _write_inputs(tmp_path, query="query clock { now }")
    config_path = tmp_path / "graphql-to-openapi.yaml"
    config_path.write_text(
        "output:\n  format: json\n"
        "unknown_scalars:\n  overrides:\n    DateTime:\n      type: string\n"
        "      format: date-time\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert",
            "--schema",
            str(schema_path),
            "--query",
            str(query_path),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert document["paths"]["/clock"]["get"]["responses"]["200"]["schema"]["properties"] == {
        "now": {"type": "string", "nullable": True, "format": "date-time"}
    }


def test_custom_scalar_without_fallback_fails_cleanly(tmp_path: Path, capsys) -> None:
    schema_path, query_path = _write_inputs(tmp_path, query="query clock { now }")
    config_path = tmp_path / "graphql-to-openapi.yaml"
    config_path.write_text("unknown_scalars:\n  fallback: null\n", encoding="utf-8")

    exit_code = main(
        [
            "convert",
            "--schema",
            str(schema_path),
            "--query",
            str(query_path),
            "--config",
            str(config_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Conversion failed: Unknown scalar: DateTime" in captured.err


def test_anonymous_query_reports_missing_operation_name(tmp_path: Path, capsys) -> None:
    schema_path, query_path = _write_inputs(
        tmp_path, query='{ arrayOfStrings(input: "a", otherInput: "b") }'
    )

    exit_code = main(["convert", "--schema", str(schema_path), "--query", str(query_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "requires a named operation on line 1" in captured.err
    assert captured.out == ""


def test_invalid_schema_is_reported(tmp_path: Path, capsys) -> None:
    schema_path, query_path = _write_inputs(tmp_path, schema="type Query {")

    exit_code = main(["convert", "--schema", str(schema_path), "--query", str(query_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("Invalid GraphQL schema: Syntax Error")


def test_every_query_error_is_reported(tmp_path: Path, capsys) -> None:
    schema_path, query_path = _write_inputs(tmp_path, query="query bad { missingOne missingTwo }")

    exit_code = main(["convert", "--schema", str(schema_path), "--query", str(query_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "missingOne" in captured.err
    assert "missingTwo" in captured.err
    assert captured.err.count("Invalid GraphQL query:") == 2


def test_missing_schema_file_is_reported(tmp_path: Path, capsys) -> None:
    _, query_path = _write_inputs(tmp_path)

    exit_code = main(
        ["convert", "--schema", str(tmp_path / "absent.graphql"), "--query", str(query_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "absent.graphql" in captured.err


def test_generate_config_writes_scaffold_once(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "graphql-to-openapi.yaml"

    assert main(["generate-config", "--output", str(output_path)]) == 0
    assert output_path.exists()
    assert main(["generate-config", "--output", str(output_path)]) == 1
    captured = capsys.readouterr()
    assert "already exists" in captured.err


def test_non_utf8_schema_file_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    schema_path, query_path = _write_inputs(tmp_path)
    schema_path.write_bytes(b"type Query {\xff\xfe}")

    exit_code = main(["convert", "--schema", str(schema_path), "--query", str(query_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "codec can't decode" in captured.err
    assert "Traceback" not in captured.err
