"""Conversion outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from graphql import GraphQLError

from graphql_to_openapi.document_conversion import MissingOperationNameError


class ConversionOutcome(str, Enum):
    """Which terminal outcome a conversion reached."""

    SCHEMA_ERROR = "schema_error"
    QUERY_ERRORS = "query_errors"
    MISSING_OPERATION_NAME = "missing_operation_name"
    SUCCESS = "success"


@dataclass(frozen=True)
class SchemaFailure:
    """The schema text could not be built into a valid schema."""

    schema_error: GraphQLError
    outcome: ClassVar[ConversionOutcome] = ConversionOutcome.SCHEMA_ERROR


@dataclass(frozen=True)
class QueryFailure:
    """The query failed to parse or validate; every fault is kept."""

    query_errors: tuple[GraphQLError, ...]
    outcome: ClassVar[ConversionOutcome] = ConversionOutcome.QUERY_ERRORS

    def __post_init__(self) -> None:
        if not self.query_errors:
            raise ValueError("QueryFailure requires at least one query error.")


@dataclass(frozen=True)
class MissingOperationNameFailure:
    """The query's operation has no name to derive a path from."""

    error: MissingOperationNameError
    outcome: ClassVar[ConversionOutcome] = ConversionOutcome.MISSING_OPERATION_NAME


@dataclass(frozen=True)
class ConversionSuccess:
    """The assembled OpenAPI document."""

    openapi_schema: dict[str, Any]
    outcome: ClassVar[ConversionOutcome] = ConversionOutcome.SUCCESS


ConversionResult = SchemaFailure | QueryFailure | MissingOperationNameFailure | ConversionSuccess


def failure_messages(result: ConversionResult) -> tuple[str, ...]:
    """Return human-readable messages for a failed result, empty on success."""
    if isinstance(result, SchemaFailure):
        return (f"Invalid GraphQL schema: {result.schema_error.message}",)
    if isinstance(result, QueryFailure):
        return tuple(f"Invalid GraphQL query: {error}" for error in result.query_errors)
    if isinstance(result, MissingOperationNameFailure):
        return (str(result.error),)
    return ()
