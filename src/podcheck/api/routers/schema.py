"""Schema endpoint: GET /schema."""

from __future__ import annotations

from fastapi import APIRouter

from podcheck.api.schemas import SchemaResponse
from podcheck.validation.sections import describe_schema

router = APIRouter()


@router.get("", response_model=SchemaResponse)
async def get_schema() -> SchemaResponse:
    """Return the constants of the fixed Pod schema."""
    return SchemaResponse(definition=describe_schema())
