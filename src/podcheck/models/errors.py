"""Diagnostic models shared by the validator and every outer surface."""

from __future__ import annotations

from pydantic import BaseModel


class Diagnostic(BaseModel):
    """A single validation failure tied to a source line."""

    line: int
    message: str
    document: int = 0

    def render(self, filename: str) -> str:
        return f"{filename}:{self.line} {self.message}"


class ValidationResult(BaseModel):
    """Result of checking one manifest file."""

    valid: bool
    filename: str
    documents: int = 0
    diagnostics: list[Diagnostic] = []

    @property
    def rendered(self) -> list[str]:
        return [d.render(self.filename) for d in self.diagnostics]
