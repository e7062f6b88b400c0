"""Schema output exports."""

from .document_rendering import OutputFormat, render_openapi_document, write_openapi_document

__all__ = ["OutputFormat", "render_openapi_document", "write_openapi_document"]
