# File: jsonmock/models/template.py
from datetime import datetime
from sqlalchemy import String, DateTime, JSON, func
from sqlalchemy.orm import Mapped, mapped_column
from jsonmock.models.base import Base

class SchemaTemplate(Base):
    __tablename__ = "schema_templates"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    schema: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # serialized field tree
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
