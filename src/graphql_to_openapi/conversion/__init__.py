"""Conversion facade exports."""

from .conversion_outcomes import (
    ConversionOutcome,
    ConversionResult,
    ConversionSuccess,
    MissingOperationNameFailure,
    QueryFailure,
    SchemaFailure,
    failure_messages,
)
from .converter import GraphQLToOpenAPIConverter, graphql_to_openapi

__all__ = [
    "ConversionOutcome",
    "ConversionResult",
    "ConversionSuccess",
    "GraphQLToOpenAPIConverter",
    "MissingOperationNameFailure",
    "QueryFailure",
    "SchemaFailure",
    "failure_messages",
    "graphql_to_openapi",
]
