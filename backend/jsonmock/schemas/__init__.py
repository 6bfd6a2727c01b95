# jsonmock/schemas/__init__.py
from .field import (
    FieldType,
    SchemaField,
    FieldList,
    ensure_required,
    has_valid_fields,
    has_primary_key,
    can_be_primary_key,
)

from .generation import (
    PreviewRequest,
    PreviewResponse,
    GenerateRequest,
)

from .template import (
    TemplateCreateRequest,
    TemplateInfo,
    DeleteTemplateResponse,
)
