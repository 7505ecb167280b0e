"""Manifest checking service, shared by the CLI, REST API and MCP server."""

from __future__ import annotations

import logging
from pathlib import Path

from podcheck.models.errors import Diagnostic, ValidationResult
from podcheck.models.nodes import Node
from podcheck.parser.loader import DocumentParseError, TrackedLoader, YAMLSafetyError
from podcheck.validation.driver import validate_documents

logger = logging.getLogger("podcheck.service")


class ManifestChecker:
    """Parse YAML text and run the Pod validator over every document.

    Stateless apart from the loader, so one instance can serve many calls.
    A parse failure short-circuits to a single diagnostic.
    """

    def __init__(self) -> None:
        self._loader = TrackedLoader()

    def check_string(self, content: str, filename: str = "<string>") -> ValidationResult:
        try:
            documents = self._loader.load_string(content)
        except DocumentParseError as exc:
            return self._parse_failed(filename, exc)
        return self._result(filename, documents)

    def check_file(self, path: Path) -> ValidationResult:
        filename = str(path)
        try:
            documents = self._loader.load(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", filename, exc)
            return self._failed(filename, 0, f"cannot read file: {exc}")
        except DocumentParseError as exc:
            return self._parse_failed(filename, exc)
        return self._result(filename, documents)

    def _result(self, filename: str, documents: list[Node]) -> ValidationResult:
        sink = validate_documents(documents, filename)
        diagnostics = sink.diagnostics
        logger.info(
            "Checked %s (documents=%d, diagnostics=%d)",
            filename, len(documents), len(diagnostics),
        )
        return ValidationResult(
            valid=not diagnostics,
            filename=filename,
            documents=len(documents),
            diagnostics=diagnostics,
        )

    def _parse_failed(self, filename: str, exc: DocumentParseError) -> ValidationResult:
        if isinstance(exc, YAMLSafetyError):
            logger.debug("YAML safety limit hit in %s: %s", filename, exc.message)
        else:
            logger.debug("YAML parse error in %s at line %d: %s", filename, exc.line, exc.message)
        return self._failed(filename, exc.line, f"parse error: {exc.message}")

    @staticmethod
    def _failed(filename: str, line: int, message: str) -> ValidationResult:
        return ValidationResult(
            valid=False,
            filename=filename,
            diagnostics=[Diagnostic(line=line, message=message)],
        )
