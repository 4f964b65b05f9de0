"""
Contactbook — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn contactbook.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  GZip        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /contacts/... (HTML)     │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ OperationError→500 │ *→500    │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse

from contactbook import __version__
from contactbook.config import settings
from contactbook.exceptions import (
    ContactbookError,
    ContactOperationError,
    DatabaseError,
    NotFoundError,
)
from contactbook.middleware.logging import RequestLoggingMiddleware
from contactbook.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    current_request_id,
)
from contactbook.routes import contacts, health

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup, before any other initialization.
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Create missing tables (database store only, when enabled)
        3. Log successful startup

    Shutdown sequence:
        1. Dispose database engine (database store only)
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Contactbook starting up (store=%s)...", settings.contact_store)

    if settings.contact_store == "database":
        from contactbook.database import create_tables

        if settings.create_tables_on_startup:
            await create_tables()
            logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d/contacts/", settings.backend_host, settings.backend_port)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Contactbook shutting down...")
    if settings.contact_store == "database":
        from contactbook.database import dispose_engine
        await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers mapping the error taxonomy to responses.

    Handler hierarchy:
        NotFoundError          → 404 "<resource> not found"
        ContactOperationError  → 500 "Failed to <operation> contact"
        DatabaseError          → 500 "Internal Server Error"
        ContactbookError       → 500 "Internal Server Error"
        Exception (fallback)   → 500 "Internal Server Error"

    Bodies are fixed plain text; details (context, tracebacks) go to the log.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = current_request_id()
        logger.info("[%s] %s: %s", rid, exc.message, exc.resource_id)
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(ContactOperationError)
    async def handle_operation_error(request: Request, exc: ContactOperationError):
        rid = current_request_id()
        logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = current_request_id()
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)

    @app.exception_handler(ContactbookError)
    async def handle_application_error(request: Request, exc: ContactbookError):
        rid = current_request_id()
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: full traceback to the log, fixed body to the client."""
        rid = current_request_id()
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=exc,
        )
        # Runs outside RequestIDMiddleware, so the header is set here
        return PlainTextResponse(
            INTERNAL_SERVER_ERROR,
            status_code=500,
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Contactbook",
        description="Address book with server-rendered pages for managing contacts.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(contacts.router)
    app.include_router(health.router)

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(url=f"{contacts.CONTACTS_PREFIX}/", status_code=303)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `contactbook.main:app` to be importable
app = create_app()
