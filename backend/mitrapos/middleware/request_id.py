"""
Mitra POS Backend — Request ID Middleware
===========================================

What:  Assigns every request a short correlation id and returns it in the
       `X-Request-ID` response header.
Why:   Error envelopes carry the same id, so a cashier's screenshot of a
       failed checkout can be matched to the server log line.
How:   Client-supplied `X-Request-ID` is reused; otherwise the first 8 chars
       of a uuid4. Stored in a ContextVar for loggers and exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var and request.state.request_id for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
