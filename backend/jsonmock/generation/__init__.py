# File: jsonmock/generation/__init__.py
from .descriptor import to_descriptor
from .mock_data_generator import (
    GenerationContext,
    generate,
    generate_from_schema,
    generate_multiple_from_schema,
    visit,
)
from .primary_key import generate_primary_key
