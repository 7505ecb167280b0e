"""Schema-driven validation of Pod manifest trees."""

from podcheck.validation.context import DiagnosticSink, ValidationContext
from podcheck.validation.driver import format_diagnostics, validate_documents
from podcheck.validation.sections import describe_schema, validate_document

__all__ = [
    "DiagnosticSink",
    "ValidationContext",
    "describe_schema",
    "format_diagnostics",
    "validate_document",
    "validate_documents",
]
