# backend/jsonmock/crud/template.py
import logging
import time
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from jsonmock.crud.defaults import BUILTIN_TEMPLATE_IDS, get_builtin_templates
from jsonmock.models import SchemaTemplate
from jsonmock.schemas.field import FieldList, SchemaField
from jsonmock.schemas.template import TemplateInfo

logger = logging.getLogger("uvicorn")


def _to_info(row: SchemaTemplate) -> TemplateInfo:
    return TemplateInfo(
        id=row.id,
        name=row.name,
        schema_=[SchemaField.model_validate(f) for f in (row.schema or [])],
        created_at=row.created_at,
        builtin=False,
    )


def _dump_fields(fields: FieldList) -> list[dict]:
    return [f.model_dump(mode="json", by_alias=True, exclude_none=True) for f in fields]


class TemplateCRUD:
    """Database operations for saved schema templates"""

    def is_builtin(self, template_id: str) -> bool:
        return template_id in BUILTIN_TEMPLATE_IDS

    def get_user_templates(self, db: Session) -> List[TemplateInfo]:
        """User-saved templates, oldest first"""
        rows = db.scalars(
            select(SchemaTemplate).order_by(SchemaTemplate.created_at, SchemaTemplate.id)
        ).all()
        return [_to_info(r) for r in rows]

    def get_templates(self, db: Session) -> List[TemplateInfo]:
        """
        Merged template list.

        Built-ins alone when nothing is saved, otherwise user templates first
        followed by every built-in whose id is not already taken.
        """
        user_templates = self.get_user_templates(db)
        defaults = get_builtin_templates()
        if not user_templates:
            return defaults

        merged = list(user_templates)
        seen = {t.id for t in merged}
        for template in defaults:
            if template.id not in seen:
                merged.append(template)
        return merged

    def get_template(self, db: Session, template_id: str) -> Optional[TemplateInfo]:
        return next((t for t in self.get_templates(db) if t.id == template_id), None)

    def load_template(self, db: Session, template_id: str) -> Optional[FieldList]:
        """Field tree of a template, or None if the id is unknown"""
        template = self.get_template(db, template_id)
        return template.schema_ if template else None

    def save_template(self, db: Session, name: str, fields: FieldList) -> TemplateInfo:
        # Millisecond timestamp ids, bumped on collision
        new_id = int(time.time() * 1000)
        while db.get(SchemaTemplate, str(new_id)) is not None:
            new_id += 1

        row = SchemaTemplate(
            id=str(new_id),
            name=name,
            schema=_dump_fields(fields),
            created_at=datetime.now(timezone.utc),
        )
        db.add(row)
        db.commit()
        db.refresh(row)
        logger.info(f"💾 Saved template '{name}' ({row.id}) with {len(fields)} root field(s)")
        return _to_info(row)

    def delete_template(self, db: Session, template_id: str) -> bool:
        """Delete a user template; returns False when nothing was stored under the id"""
        row = db.get(SchemaTemplate, template_id)
        if row is None:
            return False
        db.delete(row)
        db.commit()
        logger.info(f"🗑️ Deleted template {template_id}")
        return True

    def count(self, db: Session) -> int:
        return db.scalar(select(func.count()).select_from(SchemaTemplate)) or 0


# Create instance
template_crud = TemplateCRUD()
