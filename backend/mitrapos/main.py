"""
Mitra POS Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       uvicorn serves the module-level `app` (uvicorn mitrapos.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes (/api):                                     │
    │    transaksi · produk · kategori · subkategori      │
    │    suppliers · mitra · users · pengajuan            │
    │    login · qrcode                   + GET /health   │
    │                                                     │
    │  Exception Handlers (one envelope for all errors):  │
    │    validation→400  auth→401  not_found→404          │
    │    storage→500     internal→500                     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → optional create_all
    Shutdown: dispose the database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from mitrapos import __version__
from mitrapos.config import settings
from mitrapos.database import create_all_tables, dispose_engine
from mitrapos.exceptions import DatabaseError, ErrorKind, MitraPosError
from mitrapos.middleware.logging import RequestLoggingMiddleware
from mitrapos.middleware.request_id import RequestIDMiddleware, request_id_var
from mitrapos.routes import catalog, health, partners, transaksi, utility

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    (container runtimes collect stdout). Level comes from LOG_LEVEL.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # mitrapos.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open resources before serving; release them after the last request."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Mitra POS Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving; a dev setup without JWT_SECRET is still usable
        logger.error("Configuration error: %s", str(e))

    if settings.auto_create_tables:
        await create_all_tables()
        logger.info("Database tables ensured (AUTO_CREATE_TABLES=true)")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Mitra POS Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(
    status_code: int,
    kind: ErrorKind,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the `{success: false, error, kind, request_id}` envelope."""
    content: Dict[str, Any] = {
        "success": False,
        "error": message,
        "kind": kind.value,
        "request_id": request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _describe_validation_errors(exc: RequestValidationError) -> Dict[str, Any]:
    # Only loc and msg: ctx may hold exception objects that are not JSON-serializable
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return {"errors": errors}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to the error envelope exactly once.

    Handler hierarchy:
        RequestValidationError → 400 validation (malformed body / path)
        MitraPosError          → exc.status_code with exc.kind
        Exception (fallback)   → 500 internal, stack trace logged only
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """FastAPI's 422 becomes our 400 so every input problem looks the same."""
        details = _describe_validation_errors(exc)
        first = details["errors"][0] if details["errors"] else {"field": "", "message": "Invalid request"}
        message = first["message"].removeprefix("Value error, ")
        if first["field"]:
            message = f"{first['field']}: {message}"
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), message)
        return error_response(400, ErrorKind.VALIDATION, message, details)

    @app.exception_handler(MitraPosError)
    async def handle_app_error(request: Request, exc: MitraPosError):
        rid = request_id_var.get("")
        if isinstance(exc, DatabaseError):
            # Context (SQL error type, ids) stays server-side
            logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
            return error_response(exc.status_code, exc.kind, exc.message)

        if exc.status_code >= 500:
            logger.error("[%s] %s error: %s", rid, exc.kind.value, exc.message)
        else:
            logger.warning("[%s] %s error: %s", rid, exc.kind.value, exc.message)
        details = exc.context if exc.kind is ErrorKind.VALIDATION else None
        return error_response(exc.status_code, exc.kind, exc.message, details)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return error_response(
            500,
            ErrorKind.INTERNAL,
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Tests build the app through here and swap `get_db_session` via
    `app.dependency_overrides`.
    """
    app = FastAPI(
        title="Mitra POS API",
        description=(
            "Catalog, checkout and partner management for Mitra POS outlets. "
            "Every response is wrapped as {success, data} or {success, error, kind}."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(transaksi.router)
    for router in (*catalog.routers, *partners.routers):
        app.include_router(router)
    app.include_router(utility.router)
    app.include_router(health.router)

    return app


app = create_app()
