# app/main.py
from contextlib import asynccontextmanager
import logging
import time

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.database import create_db_and_tables

# Routers
from app.routers.auth import router as auth_router
from app.routers.users import router as users_router

settings = get_settings()

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    # Versioned API prefix, e.g. /api/v1
    app.include_router(auth_router, prefix=settings.API_V1_STR)
    app.include_router(users_router, prefix=settings.API_V1_STR)

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": settings.PROJECT_NAME,
            "version": settings.API_VERSION,
        }

    @app.get(f"{settings.API_V1_STR}/")
    def welcome():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME} API",
            "version": settings.API_VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()
