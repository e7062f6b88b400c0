"""GraphQL query to OpenAPI conversion facade."""

from __future__ import annotations

import logging
from typing import cast

from graphql import GraphQLError, GraphQLSchema, assert_valid_schema, build_schema, parse, validate

from graphql_to_openapi.document_conversion import MissingOperationNameError, traverse_document
from graphql_to_openapi.type_mapping import UnknownScalarHook

from .conversion_outcomes import (
    ConversionResult,
    ConversionSuccess,
    MissingOperationNameFailure,
    QueryFailure,
    SchemaFailure,
)

_LOGGER = logging.getLogger(__name__)
logging.getLogger("graphql_to_openapi").addHandler(logging.NullHandler())


class GraphQLToOpenAPIConverter:
    """Converts named queries against one schema into OpenAPI documents.

    The schema is built once at construction. A build failure is kept and
    returned by every later conversion instead of being raised.
    """

    def __init__(
        self, schema_text: str, *, on_unknown_scalar: UnknownScalarHook | None = None
    ) -> None:
        self.on_unknown_scalar = on_unknown_scalar
        self.schema: GraphQLSchema | None = None
        self.schema_error: GraphQLError | None = None
        try:
            schema = build_schema(schema_text)
            assert_valid_schema(schema)
        except GraphQLError as exc:
            self.schema_error = exc
        except TypeError as exc:
            self.schema_error = GraphQLError(str(exc), original_error=exc)
        else:
            self.schema = schema
        if self.schema_error is not None:
            _LOGGER.debug("Schema build failed: %s", self.schema_error.message)

    def to_openapi(self, input_query: str) -> ConversionResult:
        """Convert one query document into an OpenAPI document or a failure."""
        if self.schema_error is not None:
            return SchemaFailure(schema_error=self.schema_error)
        schema = cast(GraphQLSchema, self.schema)

        try:
            document = parse(input_query)
        except GraphQLError as exc:
            _LOGGER.debug("Query parse failed: %s", exc.message)
            return QueryFailure(query_errors=(exc,))

        query_errors = validate(schema, document)
        if query_errors:
            _LOGGER.debug("Query validation produced %d error(s)", len(query_errors))
            return QueryFailure(query_errors=tuple(query_errors))

        try:
            openapi_schema = traverse_document(
                schema, document, on_unknown_scalar=self.on_unknown_scalar
            )
        except MissingOperationNameError as exc:
            _LOGGER.debug("Conversion stopped: %s", exc)
            return MissingOperationNameFailure(error=exc)
        return ConversionSuccess(openapi_schema=openapi_schema)

    convert = to_openapi


def graphql_to_openapi(
    schema_text: str,
    input_query: str,
    *,
    on_unknown_scalar: UnknownScalarHook | None = None,
) -> ConversionResult:
    """Convert ``input_query`` against ``schema_text`` in one call."""
    converter = GraphQLToOpenAPIConverter(schema_text, on_unknown_scalar=on_unknown_scalar)
    return converter.to_openapi(input_query)
