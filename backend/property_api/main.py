"""Property API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PropertyApiError → structured JSON responses
    - CORS configured from settings (all origins by default)
    - Database pool created on startup and disposed on shutdown via lifespan
      (skipped for the in-memory storage backend)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Serve with any ASGI server, e.g. `uvicorn property_api.main:app --port 8080`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from property_api.api.error_handlers import register_error_handlers
from property_api.api.routes import health, properties
from property_api.config import get_settings
from property_api.core.domain_types import StorageBackend
from property_api.infrastructure.database import close_db, init_db
from property_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == StorageBackend.POSTGRES:
        init_db(
            settings.sqlalchemy_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle_seconds,
        )
    logger.info(
        f"Property API started (storage={settings.storage_backend.value}, "
        f"update_strategy={settings.update_strategy.value})",
    )
    yield
    await close_db()
    logger.info("Property API shutting down")


app = FastAPI(
    title="Property API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

app.include_router(health.router)
app.include_router(properties.router)

register_error_handlers(app)
