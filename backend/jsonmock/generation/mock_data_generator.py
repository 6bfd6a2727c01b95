# File: jsonmock/generation/mock_data_generator.py
"""
Mock data generator

Walks a field tree and produces JSON records. Every top-level call builds its
own GenerationContext, so nothing is shared between calls. Primary keys come
from the record index; everything else is drawn from the context's RNG.
"""

import logging
import random
from dataclasses import dataclass, field as dataclass_field
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Union

from jsonmock.generation.primary_key import generate_primary_key
from jsonmock.generation.samples import SAMPLE_POOLS, infer_string_pool
from jsonmock.schemas.field import FieldList, FieldType, SchemaField
from settings import GenerationConfig

logger = logging.getLogger("uvicorn")

JsonRecord = Dict[str, Any]


@dataclass
class GenerationContext:
    """Per-call generation state threaded through the recursive visit."""
    rng: random.Random = dataclass_field(default_factory=random.Random)

    @classmethod
    def create(cls, seed: Optional[int] = None) -> "GenerationContext":
        return cls(rng=random.Random(seed))

    def random_string(self, pool: str = "word") -> str:
        return self.rng.choice(SAMPLE_POOLS.get(pool, SAMPLE_POOLS["word"]))

    def random_number(self) -> int:
        return self.rng.randint(GenerationConfig.NUMBER_MIN, GenerationConfig.NUMBER_MAX)

    def random_boolean(self) -> bool:
        return self.rng.random() < 0.5

    def random_date(self, min_value: Optional[str] = None, max_value: Optional[str] = None) -> str:
        start, end = resolve_date_bounds(min_value, max_value)
        offset = self.rng.randint(0, (end - start).days)
        return (start + timedelta(days=offset)).isoformat()


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        logger.debug(f"Ignoring unparseable date bound: {value!r}")
        return None


def resolve_date_bounds(min_value: Optional[str], max_value: Optional[str]) -> tuple[date, date]:
    """
    Resolve the inclusive date window for a date field.

    - Missing or unparseable bounds fall back to the defaults
    - An inverted window falls back to both defaults
    """
    start = _parse_date(min_value) or GenerationConfig.DEFAULT_DATE_MIN
    end = _parse_date(max_value) or GenerationConfig.DEFAULT_DATE_MAX
    if start > end:
        logger.debug(f"Inverted date window {start}..{end}, using defaults")
        return GenerationConfig.DEFAULT_DATE_MIN, GenerationConfig.DEFAULT_DATE_MAX
    return start, end


# ----------------- Type dispatch -----------------

ValueGenerator = Callable[[SchemaField, int, GenerationContext], Any]
_GENERATORS: Dict[str, ValueGenerator] = {}


def register(kind: FieldType) -> Callable[[ValueGenerator], ValueGenerator]:
    def inner(fn: ValueGenerator) -> ValueGenerator:
        if kind.value in _GENERATORS:
            raise ValueError(f"Duplicate generator: {kind.value}")
        _GENERATORS[kind.value] = fn
        return fn
    return inner


@register(FieldType.STRING)
def gen_string(field: SchemaField, index: int, ctx: GenerationContext) -> str:
    return ctx.random_string(infer_string_pool(field.name))


@register(FieldType.NUMBER)
def gen_number(field: SchemaField, index: int, ctx: GenerationContext) -> int:
    return ctx.random_number()


@register(FieldType.BOOLEAN)
def gen_boolean(field: SchemaField, index: int, ctx: GenerationContext) -> bool:
    return ctx.random_boolean()


@register(FieldType.DATE)
def gen_date(field: SchemaField, index: int, ctx: GenerationContext) -> str:
    return ctx.random_date(field.date_min, field.date_max)


@register(FieldType.OBJECT)
def gen_object(field: SchemaField, index: int, ctx: GenerationContext) -> JsonRecord:
    if field.children:
        return build_record(field.children, index, ctx)
    return {}


@register(FieldType.ARRAY)
def gen_array(field: SchemaField, index: int, ctx: GenerationContext) -> List[Any]:
    # Items are visited at their own position, not the enclosing record index
    length = ctx.rng.randint(GenerationConfig.ARRAY_MIN_ITEMS, GenerationConfig.ARRAY_MAX_ITEMS)
    items: List[Any] = []
    for i in range(length):
        if field.array_item_type == FieldType.OBJECT.value and field.array_item_schema is not None:
            items.append(build_record(field.array_item_schema, i, ctx))
        elif field.array_item_type:
            item_field = SchemaField(id=f"temp-{i}", name=f"item{i}", type=field.array_item_type)
            items.append(visit(item_field, i, ctx))
        else:
            items.append(ctx.random_string())
    return items


def visit(field: SchemaField, index: int, ctx: GenerationContext) -> Any:
    """Generate the value of one field for the record at ``index``."""
    if field.is_primary_key:
        return generate_primary_key(field, index)

    generator = _GENERATORS.get(field.type)
    if generator is None:
        return None
    return generator(field, index, ctx)


def build_record(fields: FieldList, index: int, ctx: GenerationContext) -> JsonRecord:
    # Later siblings with the same name overwrite earlier ones
    record: JsonRecord = {}
    for field in fields:
        record[field.name] = visit(field, index, ctx)
    return record


# ----------------- Public API -----------------

def generate_from_schema(fields: FieldList, seed: Optional[int] = None) -> JsonRecord:
    """Generate a single record."""
    ctx = GenerationContext.create(seed)
    return build_record(fields, 0, ctx)


def generate_multiple_from_schema(
    fields: FieldList,
    count: int,
    seed: Optional[int] = None
) -> List[JsonRecord]:
    """Generate ``count`` records in index order; non-positive counts give an empty list."""
    ctx = GenerationContext.create(seed)
    logger.debug(f"Generating {count} record(s) from {len(fields)} root field(s)")
    return [build_record(fields, index, ctx) for index in range(count)]


def generate(
    fields: FieldList,
    count: int = 1,
    seed: Optional[int] = None
) -> Union[JsonRecord, List[JsonRecord]]:
    """Bare record when ``count`` is 1, otherwise a list of ``count`` records."""
    if count == 1:
        return generate_from_schema(fields, seed)
    return generate_multiple_from_schema(fields, count, seed)
