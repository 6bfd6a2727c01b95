import logging
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from jsonmock.core.database import engine
from jsonmock.crud import template_crud
from jsonmock.crud.defaults import BUILTIN_TEMPLATE_IDS
from jsonmock.models import Base

logger = logging.getLogger("uvicorn")


class ApplicationInitializer:
    """Handles application initialization of the template store."""

    def initialize_database(self, db: Session) -> dict:
        logger.info("🔍 Checking template store...")
        try:
            logger.info("🛠️ Creating database schema...")
            Base.metadata.create_all(bind=engine)
            logger.info("✅ Database schema created successfully")

            saved = template_crud.count(db)
            if saved == 0:
                logger.info(f"📦 No saved templates, serving {len(BUILTIN_TEMPLATE_IDS)} built-in examples")
            else:
                logger.info(f"✅ Template store holds {saved:,} saved template(s)")

            return {
                "database_ready": True,
                "saved_templates": saved,
            }

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            return {
                "database_ready": False,
                "saved_templates": 0,
                "error": str(e),
            }

    def get_initialization_summary(self, db: Session) -> dict:
        """Current state of the template store for health reporting."""
        try:
            tables = inspect(engine).get_table_names()
            saved = template_crud.count(db) if "schema_templates" in tables else 0
            return {
                "database": {
                    "status": "ready" if "schema_templates" in tables else "missing",
                    "tables": tables,
                },
                "templates": {
                    "saved": saved,
                    "builtin": len(BUILTIN_TEMPLATE_IDS),
                },
            }
        except Exception as e:
            logger.error(f"Failed to build initialization summary: {e}")
            return {
                "database": {"status": "error", "error": str(e)},
                "templates": {"saved": 0, "builtin": len(BUILTIN_TEMPLATE_IDS)},
            }
