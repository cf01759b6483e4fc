# Middleware package init
"""
Mitra POS Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error envelope
    share the same id. Responses pass back through in reverse order.
"""
