"""Validation endpoint: POST /validate."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from podcheck.api.deps import get_checker
from podcheck.api.schemas import DiagnosticDetail, ValidateRequest, ValidateResponse
from podcheck.service.checker import ManifestChecker

router = APIRouter()
logger = logging.getLogger("podcheck.api")


@router.post("", response_model=ValidateResponse)
async def validate_manifest(
    body: ValidateRequest,
    checker: ManifestChecker = Depends(get_checker),  # noqa: B008
) -> ValidateResponse:
    """Validate a manifest.  Violations are a 200 response with ``valid: false``."""
    logger.debug("validate called (filename=%s, yaml length=%d)", body.filename, len(body.manifest_yaml))
    result = checker.check_string(body.manifest_yaml, body.filename)
    return ValidateResponse(
        valid=result.valid,
        filename=result.filename,
        documents=result.documents,
        diagnostics=[DiagnosticDetail(**d.model_dump()) for d in result.diagnostics],
        rendered=result.rendered,
    )
