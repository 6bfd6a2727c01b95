# jsonmock/api/api_v1/templates.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jsonmock.core.database import get_db
from jsonmock.crud import template_crud
from jsonmock.schemas import SchemaField, TemplateCreateRequest, TemplateInfo, DeleteTemplateResponse

router = APIRouter()


@router.get("/templates", response_model=List[TemplateInfo], response_model_exclude_none=True)
def list_templates(db: Session = Depends(get_db)):
    """Saved templates followed by the built-in examples."""
    return template_crud.get_templates(db)


@router.post("/templates", response_model=TemplateInfo, response_model_exclude_none=True, status_code=201)
def save_template(payload: TemplateCreateRequest, db: Session = Depends(get_db)):
    return template_crud.save_template(db, payload.name, payload.schema_)


@router.get("/templates/{template_id}", response_model=TemplateInfo, response_model_exclude_none=True)
def get_template(template_id: str, db: Session = Depends(get_db)):
    template = template_crud.get_template(db, template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.get("/templates/{template_id}/schema", response_model=List[SchemaField], response_model_exclude_none=True)
def load_template(template_id: str, db: Session = Depends(get_db)):
    """Field tree of a template, ready to hand back to the editor."""
    fields = template_crud.load_template(db, template_id)
    if fields is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return fields


@router.delete("/templates/{template_id}", response_model=DeleteTemplateResponse)
def delete_template(template_id: str, db: Session = Depends(get_db)):
    if template_crud.is_builtin(template_id):
        raise HTTPException(status_code=400, detail="Built-in templates cannot be deleted")
    if not template_crud.delete_template(db, template_id):
        raise HTTPException(status_code=404, detail="Template not found")
    return DeleteTemplateResponse(ok=True)
