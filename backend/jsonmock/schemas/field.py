# backend/jsonmock/schemas/field.py
"""
Pydantic schemas for the field tree that drives preview and mock generation.

Object ``children`` and ``arrayItemSchema`` share the recursive ``FieldList``
shape.
"""

import enum
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, enum.Enum):
    """Closed set of field types understood by the generator."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    DATE = "date"


# Only root level scalar keys can carry a primary key
PRIMARY_KEY_TYPES = (FieldType.STRING.value, FieldType.NUMBER.value)


class SchemaField(BaseModel):
    """Single node in the schema tree."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = Field(None, description="Opaque editor token, never used as data")
    name: str = Field("", description="Key used in generated objects")
    # Kept as a plain string so unknown types survive parsing and generate null
    type: str = Field(..., description="One of string, number, boolean, object, array, date")
    required: Optional[bool] = Field(None, description="Advisory only, never omits a key")
    is_primary_key: bool = Field(False, alias="isPrimaryKey")
    children: Optional[List["SchemaField"]] = Field(None, description="Present for object fields")
    array_item_type: Optional[str] = Field(None, alias="arrayItemType")
    array_item_schema: Optional[List["SchemaField"]] = Field(None, alias="arrayItemSchema")
    date_min: Optional[str] = Field(None, alias="dateMin", description="ISO date lower bound")
    date_max: Optional[str] = Field(None, alias="dateMax", description="ISO date upper bound")
    default_value: Optional[Any] = Field(None, alias="defaultValue")


SchemaField.model_rebuild()

FieldList = List[SchemaField]


# ---------- Tree helpers ----------

def ensure_required(fields: FieldList) -> FieldList:
    """Return a copy of the tree where every unset ``required`` flag becomes True."""
    updated: FieldList = []
    for field in fields:
        changes: dict = {}
        if field.required is None:
            changes["required"] = True
        if field.children:
            changes["children"] = ensure_required(field.children)
        if field.array_item_schema:
            changes["array_item_schema"] = ensure_required(field.array_item_schema)
        updated.append(field.model_copy(update=changes))
    return updated


def has_valid_fields(fields: FieldList) -> bool:
    """True when there is at least one root field and none has a blank name."""
    return len(fields) > 0 and all(field.name.strip() != "" for field in fields)


def has_primary_key(fields: FieldList) -> bool:
    """True when any field anywhere in the tree is flagged as primary key."""
    for field in fields:
        if field.is_primary_key:
            return True
        if field.children and has_primary_key(field.children):
            return True
        if field.array_item_schema and has_primary_key(field.array_item_schema):
            return True
    return False


def can_be_primary_key(field: SchemaField, depth: int) -> bool:
    return depth == 0 and field.type in PRIMARY_KEY_TYPES
