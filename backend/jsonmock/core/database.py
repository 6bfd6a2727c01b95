# jsonmock/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jsonmock.core.config import settings

# SQLite needs the thread check disabled for FastAPI's threadpool
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ---------- DB dependency ----------
def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
