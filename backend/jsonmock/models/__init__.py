# File: jsonmock/models/__init__.py
from .base import Base
from .template import SchemaTemplate

__all__ = [
    "Base",
    "SchemaTemplate",
]
