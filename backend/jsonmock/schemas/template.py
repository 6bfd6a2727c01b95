# backend/jsonmock/schemas/template.py
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from typing import Annotated

from .field import SchemaField


class TemplateCreateRequest(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    schema_: List[SchemaField] = Field(..., alias="schema")

    model_config = ConfigDict(populate_by_name=True)


class TemplateInfo(BaseModel):
    """Named snapshot of a field tree"""
    id: str
    name: str
    schema_: List[SchemaField] = Field(..., alias="schema")
    created_at: datetime = Field(..., alias="createdAt")
    builtin: bool = False

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class DeleteTemplateResponse(BaseModel):
    ok: bool = True
