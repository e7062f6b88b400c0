"""Document conversion exports."""

from .document_visitor import (
    MissingOperationNameError,
    OpenApiDocumentVisitor,
    traverse_document,
)
from .openapi_document import build_query_parameter, new_get_operation, new_openapi_document
from .selection_frames import SelectionFrame, SelectionStack

__all__ = [
    "MissingOperationNameError",
    "OpenApiDocumentVisitor",
    "SelectionFrame",
    "SelectionStack",
    "build_query_parameter",
    "new_get_operation",
    "new_openapi_document",
    "traverse_document",
]
