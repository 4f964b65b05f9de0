"""
Contactbook — Request Correlation IDs
======================================

Each request to the contact pages gets a short ID that appears in every log
line written while handling it and in the X-Request-ID response header.

A caller may supply its own X-Request-ID. It is reused only when it looks like
an identifier (letters, digits, '.', '_' or '-', at most 64 characters).
Any other value is replaced with a generated ID.
"""

import re
import uuid
from typing import Optional
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(supplied: Optional[str]) -> str:
    """Reuse a well-formed client ID, otherwise mint a new one."""
    if supplied and _CLIENT_ID_PATTERN.match(supplied):
        return supplied
    return new_request_id()


def current_request_id() -> str:
    """ID of the request being handled, or '' outside a request."""
    return request_id_var.get()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds the correlation ID for the request and echoes it on the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
