"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from graphql_to_openapi.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    build_unknown_scalar_hook,
    load_configuration,
    write_placeholder_configuration,
)
from graphql_to_openapi.conversion import (
    ConversionSuccess,
    GraphQLToOpenAPIConverter,
    failure_messages,
)
from graphql_to_openapi.schema_output import (
    OutputFormat,
    render_openapi_document,
    write_openapi_document,
)
from graphql_to_openapi.type_mapping import ConversionInvariantError

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-to-openapi")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging level for diagnostics written to stderr",
)
def cli(log_level: str) -> None:
    """Convert named GraphQL queries into OpenAPI schema documents."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML conversion configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML conversion configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="convert")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the GraphQL schema (SDL) file",
)
@click.option(
    "--query",
    "query_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the file holding one named GraphQL query",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML conversion configuration file",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([item.value for item in OutputFormat], case_sensitive=False),
    help="Output format; overrides output.format from the configuration",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the OpenAPI document to this path instead of stdout",
)
def convert(
    schema_path: str,
    query_path: str,
    config_path: str | None,
    output_format: str | None,
    output_path: str | None,
) -> None:
    """Convert a named GraphQL query into an OpenAPI (Swagger 2.0) document."""
    try:
        configuration = load_configuration(config_path) if config_path else Configuration()
        schema_text = Path(schema_path).read_text(encoding="utf-8")
        query_text = Path(query_path).read_text(encoding="utf-8")
    except (ConfigurationError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc

    converter = GraphQLToOpenAPIConverter(
        schema_text,
        on_unknown_scalar=build_unknown_scalar_hook(configuration.unknown_scalars),
    )
    try:
        result = converter.to_openapi(query_text)
    except ConversionInvariantError as exc:
        raise CliError(f"Conversion failed: {exc}") from exc
    if not isinstance(result, ConversionSuccess):
        raise CliError("\n".join(failure_messages(result)))

    resolved_format = OutputFormat(output_format or configuration.output.output_format)
    _LOGGER.info("Converted %s against %s", query_path, schema_path)
    if output_path is None:
        click.echo(render_openapi_document(result.openapi_schema, resolved_format), nl=False)
        return
    try:
        written = write_openapi_document(result.openapi_schema, output_path, resolved_format)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
