"""
Request context middleware for request logging.

WHAT: Middleware that assigns every request an ID, captures the client IP,
and logs one line per request with method, path, status and duration.

WHY: Services log what they decided ("Email already exists: ..."); this
middleware logs what was asked and how it ended. The shared request ID
lets the two be correlated, and is echoed back to the client in the
X-Request-ID header.

HOW: Uses Starlette's request state plus a ContextVar, so the context is
available from handlers (request.state.context) and from services/DAOs
(get_request_context()) without passing it around.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Unique identifier for the request (for log correlation)
    - ip_address: Client's real IP (considering proxies)
    - path: Request path
    - method: HTTP method (GET, POST, etc.)
    """

    request_id: str
    ip_address: str
    path: str
    method: str


# Context variable for async-safe access to request context
# WHY: ContextVar gives each concurrent request its own isolated value
_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_client_ip(request: Request) -> str:
    """
    Extract the real client IP address from a request.

    HOW: Checks headers in order of trust:
    1. X-Real-IP (set by some proxies like nginx)
    2. X-Forwarded-For (comma-separated list, first is original client)
    3. request.client.host (direct connection IP)

    Args:
        request: The incoming request

    Returns:
        Client IP address as string, "unknown" if none is available
    """
    x_real_ip = request.headers.get("X-Real-IP")
    if x_real_ip:
        return x_real_ip.strip()

    # Format: "client, proxy1, proxy2"
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures request context and logs each request.

    Example:
        # In a service:
        ctx = get_request_context()
        logger.info(f"[{ctx.request_id}] creating user")
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request, add context, log the outcome.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        context = RequestContext(
            request_id=str(uuid.uuid4()),
            ip_address=get_client_ip(request),
            path=request.url.path,
            method=request.method,
        )

        request.state.context = context
        token = _request_context.set(context)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = context.request_id

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{context.method} {context.path} -> {response.status_code} "
                f"({elapsed_ms:.1f} ms) [request_id={context.request_id} ip={context.ip_address}]"
            )
            return response

        finally:
            _request_context.reset(token)
