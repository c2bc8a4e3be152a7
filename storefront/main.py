"""Storefront API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.core.exceptions import register_exception_handlers
from storefront.db.base import get_db, init_models
from storefront.middleware.request_logging import RequestLoggingMiddleware
from storefront.routers.v1 import api_router
from storefront.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if settings.auto_create_tables:
        logger.info("Creating missing tables on %s", settings.database_url)
        await init_models()
    yield


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=APP_VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=_lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(api_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health(session: AsyncSession = Depends(get_db)):
        database = "ok"
        try:
            await session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Health check cannot reach the database: %s", exc)
            await session.rollback()
            database = "unavailable"
        return HealthResponse(
            status="ok" if database == "ok" else "degraded",
            app=settings.app_name,
            env=settings.app_env,
            version=APP_VERSION,
            database=database,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("storefront.main:app", host="0.0.0.0", port=settings.app_port)
