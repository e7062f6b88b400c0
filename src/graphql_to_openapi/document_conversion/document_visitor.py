"""Single-pass document visitor assembling the OpenAPI document."""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    BREAK,
    SKIP,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    GraphQLSchema,
    OperationDefinitionNode,
    TypeInfo,
    TypeInfoVisitor,
    VariableDefinitionNode,
    Visitor,
    get_location,
    visit,
)

from graphql_to_openapi.type_mapping import (
    ConversionInvariantError,
    SelectionStackError,
    UnknownScalarHook,
    map_input_type,
    map_output_field,
    opens_selection,
)
from graphql_to_openapi.type_mapping.openapi_fragments import Fragment, empty_object_fragment

from .openapi_document import build_query_parameter, new_get_operation, new_openapi_document
from .selection_frames import SelectionStack

_LOGGER = logging.getLogger(__name__)


class MissingOperationNameError(Exception):
    """Raised when the query's operation is anonymous."""

    def __init__(self, line: int) -> None:
        super().__init__(
            "GraphQLToOpenAPIConverter requires a named operation "
            f"on line {line} of input query"
        )
        self.line = line


class OpenApiDocumentVisitor(Visitor):
    """Builds one GET path per named operation while the document is walked.

    Must be wrapped in a ``TypeInfoVisitor`` sharing ``type_info`` so field
    and variable types are resolved at each node.
    """

    def __init__(
        self, type_info: TypeInfo, *, on_unknown_scalar: UnknownScalarHook | None = None
    ) -> None:
        super().__init__()
        self.type_info = type_info
        self.on_unknown_scalar = on_unknown_scalar
        self.openapi_schema: dict[str, Any] = new_openapi_document()
        self.error: MissingOperationNameError | None = None
        self.selections = SelectionStack()
        self._parameters: list[dict[str, Any]] = []

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args: Any) -> Any:
        if node.name is None:
            self.error = MissingOperationNameError(_source_line(node))
            return BREAK
        response_schema: Fragment = empty_object_fragment()
        path_item = new_get_operation(response_schema)
        self.openapi_schema["paths"][f"/{node.name.value}"] = path_item
        self._parameters = path_item["get"]["parameters"]
        self.selections.push(node, response_schema)
        _LOGGER.debug("Registered path /%s", node.name.value)
        return None

    def leave_operation_definition(self, node: OperationDefinitionNode, *_args: Any) -> None:
        self.selections.pop_if_open(node)

    def enter_fragment_definition(self, node: FragmentDefinitionNode, *_args: Any) -> Any:
        _LOGGER.debug("Skipping fragment definition %s", node.name.value)
        return SKIP

    def enter_variable_definition(self, node: VariableDefinitionNode, *_args: Any) -> None:
        input_type = self.type_info.get_input_type()
        if input_type is None:
            raise ConversionInvariantError(
                f"No input type in scope for variable '{node.variable.name.value}'."
            )
        fragment = map_input_type(input_type, 0, on_unknown_scalar=self.on_unknown_scalar)
        self._parameters.append(build_query_parameter(node.variable.name.value, fragment))

    def enter_field(self, node: FieldNode, *_args: Any) -> None:
        field_def = self.type_info.get_field_def()
        if field_def is None:
            raise ConversionInvariantError(
                f"No field definition in scope for '{node.name.value}'."
            )
        fragment = map_output_field(field_def, on_unknown_scalar=self.on_unknown_scalar)
        response_key = node.alias.value if node.alias else node.name.value
        fragment = self.selections.top.attach(response_key, fragment)
        if opens_selection(fragment):
            self.selections.push(node, fragment)

    def leave_field(self, node: FieldNode, *_args: Any) -> None:
        self.selections.pop_if_open(node)

    def leave_document(self, _node: DocumentNode, *_args: Any) -> None:
        if len(self.selections):
            raise SelectionStackError(
                f"{len(self.selections)} selection frame(s) left open after traversal."
            )


def traverse_document(
    schema: GraphQLSchema,
    document: DocumentNode,
    *,
    on_unknown_scalar: UnknownScalarHook | None = None,
) -> dict[str, Any]:
    """Visit a validated document once and return the assembled OpenAPI schema.

    Raises:
      MissingOperationNameError: If the operation is anonymous. The walk stops
        at that operation.
    """
    type_info = TypeInfo(schema)
    visitor = OpenApiDocumentVisitor(type_info, on_unknown_scalar=on_unknown_scalar)
    visit(document, TypeInfoVisitor(type_info, visitor))
    if visitor.error is not None:
        raise visitor.error
    return visitor.openapi_schema


def _source_line(node: OperationDefinitionNode) -> int:
    if node.loc is None:
        return 1
    return get_location(node.loc.source, node.loc.start).line
