"""Diagnostic sink and the context threaded through every section validator."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from podcheck.models.errors import Diagnostic


class DiagnosticSink:
    """Append-only, ordered collection of diagnostics.

    Never deduplicates and never reorders: the order of ``add`` calls is the
    order diagnostics are reported in.  Not synchronised; one sink belongs to
    one walk.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def add(self, line: int, message: str, document: int = 0) -> None:
        self._items.append(Diagnostic(line=line, message=message, document=document))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._items)


@dataclass(frozen=True)
class ValidationContext:
    """``(filename, sink)`` for one run, plus the index of the current document."""

    filename: str
    sink: DiagnosticSink = field(default_factory=DiagnosticSink)
    document: int = 0

    def report(self, line: int, message: str) -> None:
        self.sink.add(line, message, self.document)

    def for_document(self, index: int) -> ValidationContext:
        return ValidationContext(filename=self.filename, sink=self.sink, document=index)
