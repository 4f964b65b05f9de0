# Middleware package init
"""
Contactbook — Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    - Request ID first: every later log line can carry the correlation ID
    - Logging: records status and duration once the response is produced
"""
