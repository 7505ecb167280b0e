"""Entry point of the validation core: one walk per document, one shared sink."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from podcheck.models.errors import Diagnostic
from podcheck.models.nodes import Node
from podcheck.validation.context import DiagnosticSink, ValidationContext
from podcheck.validation.sections import validate_document

EMPTY_CONTENT_MESSAGE = "YAML content is empty or invalid"


def validate_documents(
    documents: Sequence[Node],
    filename: str,
    sink: DiagnosticSink | None = None,
) -> DiagnosticSink:
    """Validate every document in order and return the sink holding the results.

    Documents share the sink but are walked independently, so diagnostics
    carry the index of the document that produced them.  An empty document
    list is itself reported.
    """
    ctx = ValidationContext(filename=filename, sink=sink if sink is not None else DiagnosticSink())
    if not documents:
        ctx.report(1, EMPTY_CONTENT_MESSAGE)
        return ctx.sink
    for index, doc in enumerate(documents):
        validate_document(ctx.for_document(index), doc)
    return ctx.sink


def format_diagnostics(filename: str, diagnostics: Iterable[Diagnostic]) -> list[str]:
    """Render diagnostics as ``<filename>:<line> <message>``."""
    return [d.render(filename) for d in diagnostics]
