from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobhunter.core.errors import AuthenticationError, InternalError, JobHunterError, ValidationError

logger = logging.getLogger(__name__)


def _error_response(request: Request, exc: JobHunterError) -> JSONResponse:
    content = {
        "error": {
            "code": exc.code,
            "message": exc.message,
            "detail": exc.detail,
        },
        "request_id": getattr(request.state, "request_id", None),
    }
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def jobhunter_exception_handler(request: Request, exc: JobHunterError) -> JSONResponse:
    """Render a JobHunterError as the standard error body."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.warning("%s (%s): %s", exc.code, request.url.path, exc.message)
    return _error_response(request, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Re-render FastAPI body/query validation failures as a 400 ValidationError."""
    fields = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        fields[".".join(loc) or "body"] = err.get("msg", "invalid value")
    return await jobhunter_exception_handler(request, ValidationError("Invalid request body", detail=fields))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never let an exception escape without a response."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(request, InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JobHunterError, jobhunter_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
