"""
Mitra POS Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for every failure the API reports.
Why:   Services raise; the handlers registered in main.py translate each
       exception into the `{success: false, error, kind}` envelope exactly
       once, so no route needs its own try/except.
How:   Each exception carries a human-readable message, an optional context
       dict (logged, never returned for storage errors), a stable `kind`
       and the HTTP status it maps to.

Exception Hierarchy:
    MitraPosError (base)                      kind       HTTP
    ├── ValidationError                       validation 400
    ├── NotFoundError                         not_found  404
    │   └── UnresolvedProductError            not_found  500
    ├── AuthError                             auth       401
    └── DatabaseError                         storage    500

Clients should branch on `kind`, not on the message text.
"""

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Stable, machine-readable error categories exposed as `kind`."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
    AUTH = "auth"
    INTERNAL = "internal"


class MitraPosError(Exception):
    """
    Base exception for all Mitra POS application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only validation errors return it)
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MitraPosError):
    """
    Raised when client input fails a business-rule check.

    Schema-level problems (missing fields, wrong types) are caught earlier by
    FastAPI and reported through the same 400 envelope in main.py.
    """

    kind = ErrorKind.VALIDATION
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(MitraPosError):
    """
    Raised when a requested row does not exist.

    SQLAlchemy returns None (or an empty result) for missing records; the
    service layer converts that into this exception.
    """

    kind = ErrorKind.NOT_FOUND
    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class UnresolvedProductError(NotFoundError):
    """
    Raised by the order enricher when a submitted product id has no match.

    Still a `not_found` kind, but the transaction endpoint reports it as a
    500 so existing clients of POST /api/transaksi keep their contract.
    """

    status_code = 500

    def __init__(self, product_id: Any, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            resource="produk",
            resource_id=product_id,
            context=context,
            message=f"Produk with ID '{product_id}' was not found",
        )
        self.product_id = product_id


class AuthError(MitraPosError):
    """Raised when login credentials do not match a stored user."""

    kind = ErrorKind.AUTH
    status_code = 401

    def __init__(
        self,
        message: str = "Invalid username or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(MitraPosError):
    """
    Raised when a database operation fails unexpectedly.

    Security Note:
        The message returned to the client is always generic. The SQL error
        and its context are logged server-side only.
    """

    kind = ErrorKind.STORAGE
    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
