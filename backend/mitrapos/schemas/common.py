"""
Mitra POS Backend — Response Envelope Schemas
===============================================

What:  The envelope shared by every endpoint.
Why:   Clients check one boolean (`success`) and then read either `data` or
       `error`. Errors also carry a stable `kind` so clients never have to
       pattern-match message text.

Success:  {"success": true,  "data": ...}
Error:    {"success": false, "error": "...", "kind": "not_found",
           "details": {...}, "request_id": "a1b2c3d4"}
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Successful response wrapping any payload under `data`."""
    success: bool = Field(default=True, description="Always true for successful responses")
    data: T = Field(description="Response payload")


class ErrorResponse(BaseModel):
    """
    Standardized error response for all API errors.

    Example:
        {
            "success": false,
            "error": "pesanan must be a non-empty array of product ids",
            "kind": "validation",
            "details": {"field": "pesanan"},
            "request_id": "550e8400"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error description")
    kind: str = Field(description="Machine-readable error kind: validation, not_found, storage, auth, internal")
    details: Optional[dict] = Field(default=None, description="Additional error context (validation only)")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
