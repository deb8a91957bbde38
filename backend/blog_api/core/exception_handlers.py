"""
FastAPI exception handlers.

WHAT: Turns every failure into the same JSON body:
``{"error", "message", "status_code", "details"}``.

- Business rejections (AppException subclasses) carry their own status
  code: 400 for InvalidAge/EmailConflict/dangling references, 404 for a
  missing id in the URL.
- Structural request errors (missing field, blank text, bad email or UUID)
  are 400 with one entry per offending field, named as on the wire
  (``userId``, not ``user_id``).
- Anything else is logged with its traceback and answered with a bare 500.

Every line logged here carries the request id echoed in X-Request-ID.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.exceptions import AppException
from blog_api.middleware.request_context import get_request_context


logger = logging.getLogger(__name__)

# First element of a pydantic error location when it names the request part
REQUEST_LOCATIONS = ("body", "query", "path", "header")


def _request_label(request: Request) -> str:
    ctx = get_request_context()
    request_id = ctx.request_id if ctx else "-"
    return f"{request.method} {request.url.path} [request_id={request_id}]"


def _error_body(
    error: str, message: str, status_code: int, details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    return {"error": error, "message": message, "status_code": status_code, "details": details}


def _field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors into ``{location, field, message, type}`` entries.

    ``("body", "userId")`` becomes location "body", field "userId". A whole
    missing or unparsable body has an empty field.
    """
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"]]
        location = loc.pop(0) if loc and loc[0] in REQUEST_LOCATIONS else "body"
        errors.append(
            {
                "location": location,
                "field": ".".join(loc),
                "message": error["msg"],
                "type": error["type"],
            }
        )
    return errors


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Answer a business rejection with its own status code.

    The service that raised it has already logged the reason; this only
    records how the request ended.
    """
    logger.info(f"{_request_label(request)} rejected: {exc.__class__.__name__}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Answer a structurally invalid request with 400.

    WHY: These requests never reach the validation layer, so the body lists
    every failing field at once rather than stopping at the first.
    """
    errors = _field_errors(exc)
    fields = ", ".join(e["field"] or e["location"] for e in errors)
    logger.warning(f"{_request_label(request)} invalid request: {fields}")

    return JSONResponse(
        status_code=400,
        content=_error_body("ValidationError", "Request validation failed", 400, {"errors": errors}),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes (404) and unsupported methods (405, e.g. PUT on a comment)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTPException", exc.detail, exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all for unexpected exceptions.

    The traceback goes to the log only; the client sees a generic message.
    """
    logger.exception(f"{_request_label(request)} unhandled error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=_error_body("InternalServerError", "An unexpected error occurred", 500),
    )
