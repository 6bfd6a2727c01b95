# jsonmock/api/api_v1/generate.py
"""
FastAPI routes for schema preview and mock data generation.
"""

import logging
from typing import Any
from fastapi import APIRouter, HTTPException

from jsonmock.generation import generate, to_descriptor
from jsonmock.schemas import (
    GenerateRequest, PreviewRequest, PreviewResponse,
    ensure_required, has_valid_fields, has_primary_key,
)
from settings import GenerationConfig

logger = logging.getLogger("uvicorn")

router = APIRouter()


def _clamp_count(count: int) -> int:
    return max(GenerationConfig.MIN_RECORDS, min(GenerationConfig.MAX_RECORDS, count))


@router.post("/schema/preview", response_model=PreviewResponse)
def preview_schema(payload: PreviewRequest):
    """Structural descriptor of the field tree, safe to call on every edit."""
    return PreviewResponse(
        schema_=to_descriptor(payload.fields),
        has_valid_fields=has_valid_fields(payload.fields),
        has_primary_key=has_primary_key(payload.fields),
    )


@router.post("/generate", response_model=Any)
def generate_records(payload: GenerateRequest):
    """
    Generate mock records for a field tree.

    - ``count`` is clamped to 1..100
    - count 1 returns a bare object, anything else a list
    """
    if not has_valid_fields(payload.fields):
        raise HTTPException(status_code=400, detail="At least one field is required and every field needs a name")

    count = _clamp_count(payload.count)
    fields = ensure_required(payload.fields)
    logger.info(f"⚙️ Generating {count} record(s) from {len(fields)} root field(s)")
    return generate(fields, count, seed=payload.seed)
