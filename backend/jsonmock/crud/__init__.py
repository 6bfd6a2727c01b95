# backend/jsonmock/crud/__init__.py
from .template import template_crud

__all__ = ["template_crud"]
