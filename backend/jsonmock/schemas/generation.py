# backend/jsonmock/schemas/generation.py
"""
Request/response schemas for schema preview and mock generation.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .field import SchemaField


class PreviewRequest(BaseModel):
    fields: List[SchemaField] = Field(default_factory=list)


class PreviewResponse(BaseModel):
    """Structural descriptor of a field tree plus editor status flags."""
    model_config = ConfigDict(populate_by_name=True)

    schema_: Dict[str, Any] = Field(..., alias="schema")
    has_valid_fields: bool = Field(..., alias="hasValidFields")
    has_primary_key: bool = Field(..., alias="hasPrimaryKey")


class GenerateRequest(BaseModel):
    fields: List[SchemaField]
    count: int = Field(1, description="Records to generate, clamped to 1..100")
    seed: Optional[int] = Field(None, description="Seed for reproducible output")
