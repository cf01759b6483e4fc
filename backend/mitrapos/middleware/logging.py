"""
Mitra POS Backend — Request Logging Middleware
================================================

What:  One access log line per HTTP request on the `mitrapos.access` logger.

Line format:
    POST /api/transaksi 201 12.4ms [a1b2c3d4] from 10.0.0.7
    GET /api/transaksi/u1 404 3.1ms [a1b2c3d4] from 10.0.0.7 (route /api/transaksi/{id_pemesan})

The route template is appended when it differs from the concrete path, so
lines for one endpoint can be grouped regardless of ids. The same values are
attached as `extra` fields for structured handlers.

Request bodies are never logged (they carry customer names, phone numbers
and login passwords).
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mitrapos.middleware.request_id import request_id_var

logger = logging.getLogger("mitrapos.access")

# Probes and docs assets
QUIET_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> Optional[str]:
    route = request.scope.get("route")
    return getattr(route, "path", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs an access line for every request outside QUIET_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        template = _route_template(request)

        message = "%s %s %d %.1fms [%s] from %s"
        args = [request.method, path, response.status_code, elapsed_ms, rid, client_ip]
        if template and template != path:
            message += " (route %s)"
            args.append(template)

        logger.log(
            level_for_status(response.status_code),
            message,
            *args,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "route": template,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
