"""
main.py — Event Service API entry point

The FastAPI application instance lives here. All middleware, routers,
and startup/shutdown events are registered in this file.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 8000

Production (multiple worker processes):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Docs (once running):
    http://localhost:8000/docs    — Swagger UI (interactive)
    http://localhost:8000/redoc   — ReDoc (read-only)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers.events import router as events_router
from api.routers.health import router as health_router
from core.config import settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware
from db.database import init_db
from services.exceptions import EventNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ────────────────────────────────────────────────────────────────
    configure_logging(settings.log_level, log_to_file=settings.log_to_file)
    init_db()
    logger.info(
        "Event Service API starting",
        extra={
            "environment": settings.environment,
            "version": settings.app_version,
            "log_level": settings.log_level,
            "allowed_origins": settings.allowed_origins,
        },
    )
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    logger.info("Event Service API shutting down")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title=settings.app_name,
    description=(
        "CRUD service for events. "
        "Paginated responses carry first/prev/next/last/self hypermedia links."
    ),
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Middleware  (add_middleware order matters: last added = outermost = first to
# handle incoming requests)
#
#   Execution order for a request:
#     CORS → RequestID → Timing → route handler
#   Execution order for a response:
#     route handler → Timing → RequestID → CORS
# ---------------------------------------------------------------------------

# Timing — added first so it runs innermost (after RequestID has set the ID)
app.add_middleware(TimingMiddleware)

# RequestID — stamps request.state.request_id and X-Request-ID header
app.add_middleware(RequestIDMiddleware)

# CORS — outermost so browser preflight OPTIONS requests are handled immediately
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Request-ID"],
)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

def _error_response(request: Request, status_code: int, error) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "status_code": status_code,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return structured JSON for all HTTP errors.

    Registered on Starlette's HTTPException so unknown routes (404) and wrong
    methods (405) are covered as well as HTTPExceptions raised by handlers.
    """
    return _error_response(request, exc.status_code, exc.detail)


@app.exception_handler(EventNotFoundError)
async def event_not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
    """Service-level 'no such event' → 404."""
    logger.info("event not found", extra={"event_id": exc.event_id, "path": request.url.path})
    return _error_response(request, 404, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, return clean JSON."""
    logger.error(
        "unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return _error_response(request, 500, "Internal server error")


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health_router)                  # /health, /health/db  (unversioned)
app.include_router(events_router, prefix="/api")   # /api/events/...


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", tags=["root"], summary="API root")
def root():
    """Confirms the API is running. Returns service name, version, and docs URL."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs":    "/docs",
    }
