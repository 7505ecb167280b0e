"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    manifest_yaml: str = Field(description="YAML manifest content (one or more documents)")
    filename: str = Field(default="<request>", description="Label used in rendered diagnostics")


class DiagnosticDetail(BaseModel):
    """A single diagnostic."""

    line: int
    message: str
    document: int = 0


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    valid: bool
    filename: str
    documents: int
    diagnostics: list[DiagnosticDetail] = []
    rendered: list[str] = []


class SchemaResponse(BaseModel):
    """Response for GET /schema: the fixed Pod schema constants."""

    definition: dict[str, object]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
