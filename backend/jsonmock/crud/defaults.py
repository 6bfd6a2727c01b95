# backend/jsonmock/crud/defaults.py
"""Built-in example templates, always available in the template list."""

from datetime import datetime, timezone
from typing import List

from jsonmock.schemas.field import SchemaField
from jsonmock.schemas.template import TemplateInfo

_BUILTIN_TEMPLATES = [
    {
        "id": "default-user-profile",
        "name": "User Profile",
        "schema": [
            {"id": 1, "name": "id", "type": "number", "isPrimaryKey": True},
            {"id": 2, "name": "name", "type": "string"},
            {"id": 3, "name": "email", "type": "string"},
            {"id": 4, "name": "age", "type": "number"},
            {"id": 5, "name": "isActive", "type": "boolean"},
            {"id": 6, "name": "createdAt", "type": "date"},
        ],
    },
    {
        "id": "default-product",
        "name": "Product",
        "schema": [
            {"id": 1, "name": "id", "type": "number", "isPrimaryKey": True},
            {"id": 2, "name": "product", "type": "string"},
            {"id": 3, "name": "description", "type": "string"},
            {"id": 4, "name": "price", "type": "number"},
            {"id": 5, "name": "inStock", "type": "boolean"},
            {"id": 6, "name": "tags", "type": "array", "arrayItemType": "string"},
            {"id": 7, "name": "createdAt", "type": "date"},
        ],
    },
    {
        "id": "default-blog-post",
        "name": "Blog Post",
        "schema": [
            {"id": 1, "name": "id", "type": "number", "isPrimaryKey": True},
            {"id": 2, "name": "title", "type": "string"},
            {"id": 3, "name": "author", "type": "object", "children": [
                {"id": 31, "name": "name", "type": "string"},
                {"id": 32, "name": "email", "type": "string"},
            ]},
            {"id": 4, "name": "content", "type": "string"},
            {"id": 5, "name": "tags", "type": "array", "arrayItemType": "string"},
            {"id": 6, "name": "published", "type": "boolean"},
            {"id": 7, "name": "publishedAt", "type": "date"},
        ],
    },
    {
        "id": "default-order",
        "name": "Order",
        "schema": [
            {"id": 1, "name": "orderId", "type": "number", "isPrimaryKey": True},
            {"id": 2, "name": "userId", "type": "number"},
            {"id": 3, "name": "items", "type": "array", "arrayItemType": "object", "arrayItemSchema": [
                {"id": 31, "name": "productId", "type": "number"},
                {"id": 32, "name": "quantity", "type": "number"},
                {"id": 33, "name": "price", "type": "number"},
            ]},
            {"id": 4, "name": "total", "type": "number"},
            {"id": 5, "name": "status", "type": "string"},
            {"id": 6, "name": "orderedAt", "type": "date"},
        ],
    },
    {
        "id": "default-employee",
        "name": "Employee Record",
        "schema": [
            {"id": 1, "name": "employeeId", "type": "number", "isPrimaryKey": True},
            {"id": 2, "name": "name", "type": "string"},
            {"id": 3, "name": "department", "type": "string"},
            {"id": 4, "name": "email", "type": "string"},
            {"id": 5, "name": "hireDate", "type": "date"},
            {"id": 6, "name": "salary", "type": "number"},
            {"id": 7, "name": "isActive", "type": "boolean"},
        ],
    },
]

BUILTIN_TEMPLATE_IDS = frozenset(t["id"] for t in _BUILTIN_TEMPLATES)


def get_builtin_templates() -> List[TemplateInfo]:
    """Fresh copies of the built-in templates, stamped with the current time."""
    now = datetime.now(timezone.utc)
    return [
        TemplateInfo(
            id=t["id"],
            name=t["name"],
            schema_=[SchemaField.model_validate(f) for f in t["schema"]],
            created_at=now,
            builtin=True,
        )
        for t in _BUILTIN_TEMPLATES
    ]
