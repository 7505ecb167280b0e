"""Tests for the document driver: multi-document runs, shared sink, idempotence."""

from __future__ import annotations

from podcheck.parser.loader import TrackedLoader
from podcheck.validation.context import DiagnosticSink
from podcheck.validation.driver import (
    EMPTY_CONTENT_MESSAGE,
    format_diagnostics,
    validate_documents,
)
from tests.conftest import FIXTURES_DIR, MULTI_DOCUMENT_YAML, VALID_POD_YAML


class TestValidateDocuments:
    def test_valid_document(self, loader: TrackedLoader) -> None:
        sink = validate_documents(loader.load_string(VALID_POD_YAML), "pod.yaml")
        assert len(sink) == 0
        assert not sink

    def test_empty_document_list_reported(self) -> None:
        sink = validate_documents([], "empty.yaml")
        assert [(d.line, d.message) for d in sink] == [(1, EMPTY_CONTENT_MESSAGE)]

    def test_multi_document_isolation(self, loader: TrackedLoader) -> None:
        docs = loader.load_string(MULTI_DOCUMENT_YAML)
        diagnostics = validate_documents(docs, "pods.yaml").diagnostics
        assert [(d.document, d.line, d.message) for d in diagnostics] == [
            (1, 32, "metadata is required"),
        ]

    def test_multi_document_fixture(self, loader: TrackedLoader) -> None:
        docs = loader.load(FIXTURES_DIR / "multi_document.yaml")
        diagnostics = validate_documents(docs, "multi.yaml").diagnostics
        assert [d.render("multi.yaml") for d in diagnostics] == ["multi.yaml:16 metadata is required"]
        assert {d.document for d in diagnostics} == {1}

    def test_shared_sink_appends(self, loader: TrackedLoader) -> None:
        sink = DiagnosticSink()
        docs = loader.load_string("kind: Pod\n")
        validate_documents(docs, "a.yaml", sink)
        validate_documents(docs, "a.yaml", sink)
        assert [d.message for d in sink] == [
            "apiVersion is required",
            "metadata is required",
            "spec is required",
        ] * 2

    def test_idempotent(self, loader: TrackedLoader) -> None:
        docs = loader.load(FIXTURES_DIR / "invalid_pod.yaml")
        first = format_diagnostics("p.yaml", validate_documents(docs, "p.yaml"))
        second = format_diagnostics("p.yaml", validate_documents(docs, "p.yaml"))
        assert first == second
        assert first == [
            "p.yaml:2 kind has unsupported value 'Deployment'",
            "p.yaml:8 image has invalid format 'registry.bigbrother.io/web'",
            "p.yaml:11 memory has invalid format '512'",
        ]


class TestDiagnosticSink:
    def test_never_deduplicates(self) -> None:
        sink = DiagnosticSink()
        sink.add(3, "x is required")
        sink.add(3, "x is required")
        assert len(sink) == 2

    def test_keeps_insertion_order(self) -> None:
        sink = DiagnosticSink()
        sink.add(9, "late line first")
        sink.add(1, "early line second")
        assert [d.line for d in sink] == [9, 1]

    def test_diagnostics_returns_copy(self) -> None:
        sink = DiagnosticSink()
        sink.add(1, "a")
        sink.diagnostics.clear()
        assert len(sink) == 1
