"""Book Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookRecordError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered once here
    - X-Request-ID echoed (or generated) per request and bound into the log context
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import init_db
from app.infrastructure.observability import bind_request_context, setup_logging
from app.config import get_settings
from app.api.routes import books, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Book Records API started")
    yield
    await manager.dispose()
    logger.info("Book Records API shutting down")


app = FastAPI(
    title="Book Records API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request context — every log line of a request carries its id, method and path
@app.middleware("http")
async def bind_request_logging_context(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with bind_request_context(
        request_id=request_id, method=request.method, path=request.url.path,
    ):
        response = await call_next(request)
    response.headers.setdefault("X-Request-ID", request_id)
    return response


# Routes — explicit registration
app.include_router(health.router)
app.include_router(books.router)

register_error_handlers(app)
