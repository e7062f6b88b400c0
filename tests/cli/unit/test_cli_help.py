"""CLI smoke tests."""

from click.testing import CliRunner
from graphql_to_openapi.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "generate-config" in result.output
    assert "--log-level" in result.output
