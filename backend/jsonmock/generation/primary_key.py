# File: jsonmock/generation/primary_key.py
"""
Primary key policy.

Keys are derived purely from the record position, so they are unique across
one generation call without any bookkeeping. Inside array items the position
is the element index, so keys restart at 1 in every array.
"""

from typing import Union

from jsonmock.schemas.field import FieldType, SchemaField
from settings import GenerationConfig


def generate_primary_key(field: SchemaField, index: int) -> Union[int, str]:
    """
    Build the key for ``field`` in the record at 0-based ``index``.

    String keys follow the field name (case-insensitive, first match wins):
    uuid -> ``<name>_001``, email -> ``user1@example.com``,
    user/username -> ``user1``, id -> ``<name>_001``, otherwise ``<name>_1``.
    """
    position = index + 1

    if field.type == FieldType.NUMBER.value:
        return position

    if field.type == FieldType.STRING.value:
        field_name = field.name.lower()
        padded = str(position).zfill(GenerationConfig.PRIMARY_KEY_PAD_WIDTH)

        if "uuid" in field_name:
            return f"{field_name}_{padded}"
        if "email" in field_name:
            return f"user{position}@example.com"
        if "username" in field_name or "user" in field_name:
            return f"user{position}"
        if "id" in field_name:
            return f"{field_name}_{padded}"
        return f"{field_name}_{position}"

    # Not an eligible key type, fall back to the sequence number
    return position
