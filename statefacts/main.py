"""States API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StatesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Catalog loaded and database initialized once, in the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Catalog stored on app.state and handed to routes by dependency
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from statefacts.api.error_handlers import register_error_handlers
from statefacts.api.routes import health, states
from statefacts.config import get_settings
from statefacts.core.catalog import load_catalog
from statefacts.infrastructure.database import init_db
from statefacts.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.catalog = load_catalog(settings.catalog_path)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("States API started")
    yield
    await manager.dispose()
    logger.info("States API shutting down")


app = FastAPI(
    title="States API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(states.router)

register_error_handlers(app)
