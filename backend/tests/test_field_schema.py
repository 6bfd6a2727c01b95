# backend/tests/test_field_schema.py
from jsonmock.schemas import (
    SchemaField, can_be_primary_key, ensure_required, has_primary_key, has_valid_fields,
)
from conftest import make_fields


def test_editor_payload_parses_with_camel_case_names():
    field = SchemaField.model_validate({
        "id": "f-1",
        "name": "items",
        "type": "array",
        "arrayItemType": "object",
        "arrayItemSchema": [{"id": 2, "name": "sku", "type": "string", "isPrimaryKey": True}],
        "dateMin": "2020-01-01",
    })
    assert field.array_item_type == "object"
    assert field.array_item_schema[0].is_primary_key is True
    assert field.date_min == "2020-01-01"
    assert field.children is None

    dumped = field.model_dump(by_alias=True, exclude_none=True)
    assert dumped["arrayItemSchema"][0]["isPrimaryKey"] is True


def test_ensure_required_fills_unset_flags_recursively():
    fields = make_fields(
        {"name": "a", "type": "string", "required": False},
        {"name": "b", "type": "object", "children": [{"name": "c", "type": "number"}]},
        {"name": "d", "type": "array", "arrayItemType": "object", "arrayItemSchema": [
            {"name": "e", "type": "boolean"},
        ]},
    )
    updated = ensure_required(fields)
    assert updated[0].required is False
    assert updated[1].required is True
    assert updated[1].children[0].required is True
    assert updated[2].array_item_schema[0].required is True
    # input left alone
    assert fields[1].required is None
    assert fields[1].children[0].required is None


def test_has_valid_fields():
    assert has_valid_fields([]) is False
    assert has_valid_fields(make_fields({"name": "  ", "type": "string"})) is False
    assert has_valid_fields(make_fields({"name": "x", "type": "string"})) is True


def test_has_primary_key_searches_whole_tree():
    assert has_primary_key(make_fields({"name": "x", "type": "string"})) is False
    nested = make_fields({"name": "o", "type": "array", "arrayItemType": "object", "arrayItemSchema": [
        {"name": "k", "type": "number", "isPrimaryKey": True},
    ]})
    assert has_primary_key(nested) is True


def test_primary_key_eligibility():
    assert can_be_primary_key(SchemaField(name="id", type="number"), 0) is True
    assert can_be_primary_key(SchemaField(name="id", type="string"), 0) is True
    assert can_be_primary_key(SchemaField(name="id", type="number"), 1) is False
    assert can_be_primary_key(SchemaField(name="on", type="boolean"), 0) is False
