import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsonmock import __version__
from jsonmock.core.config import settings
from jsonmock.core.database import SessionLocal
from jsonmock.api.api_v1.api import api_router
from jsonmock.initialization import ApplicationInitializer

# Initialize logger for uvicorn
uvicorn_logger = logging.getLogger("uvicorn")
uvicorn_logger.setLevel(settings.LOG_LEVEL.upper())

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""

    initializer = ApplicationInitializer()

    try:
        uvicorn_logger.info("🚀 Starting JSON Mock API initialization...")

        with SessionLocal() as db:
            db_status = initializer.initialize_database(db)
            if not db_status["database_ready"]:
                uvicorn_logger.warning("⚠️ Template store initialization incomplete")
                if "error" in db_status:
                    uvicorn_logger.error(f"❌ Error: {db_status['error']}")

            app.state.initialization_summary = initializer.get_initialization_summary(db)

        uvicorn_logger.info("🎉 JSON Mock API initialization completed! 🚀")

        yield

    except Exception as e:
        uvicorn_logger.error(f"🔥 Startup error: {e}")
        import traceback
        uvicorn_logger.error(f"Full traceback: {traceback.format_exc()}")
        raise

# FastAPI app setup
app = FastAPI(
    title="JSON Mock API",
    description="API for previewing field schemas and generating mock JSON records from them",
    version=__version__,
    lifespan=lifespan
)

# CORS Middleware Setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API Router Setup
app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "JSON Mock API is running!",
        "version": __version__,
        "features": [
            "Nested object and array schemas",
            "Sequential primary keys",
            "Name-aware sample strings",
            "Bounded random dates",
            "Saved schema templates",
        ],
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
def health_check():
    """Health check endpoint with template store status."""
    try:
        with SessionLocal() as db:
            summary = ApplicationInitializer().get_initialization_summary(db)
        return {
            "status": "healthy",
            "version": __version__,
            "components": summary,
        }
    except Exception as e:
        return {
            "status": "error",
            "error": str(e),
            "version": __version__
        }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
