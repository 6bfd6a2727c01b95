# File: jsonmock/generation/descriptor.py
"""Structural type descriptor of a field tree, used for previews."""

from typing import Any, Dict

from jsonmock.schemas.field import FieldList, FieldType, SchemaField

SCALAR_TYPES = (FieldType.STRING.value, FieldType.NUMBER.value, FieldType.BOOLEAN.value)


def to_descriptor(fields: FieldList) -> Dict[str, Any]:
    """Map a field list to ``{name: type descriptor}`` in input order."""
    schema: Dict[str, Any] = {}
    for field in fields:
        schema[field.name] = field_descriptor(field)
    return schema


def field_descriptor(field: SchemaField) -> Any:
    if field.type in SCALAR_TYPES:
        return field.type

    if field.type == FieldType.OBJECT.value:
        if field.children:
            return to_descriptor(field.children)
        return {}

    if field.type == FieldType.ARRAY.value:
        if field.array_item_type == FieldType.OBJECT.value and field.array_item_schema is not None:
            return [to_descriptor(field.array_item_schema)]
        if field.array_item_type:
            return [field.array_item_type]
        return [FieldType.STRING.value]

    # date and anything unrecognised
    return field.type
