"""
Exception handlers for the application.

Errors are answered with the framework's generic responses; the hypermedia
client gets no structured error body.
"""
import sqlite3
import logging

from fastapi.exception_handlers import request_validation_exception_handler

from hypertodo.adapters.http_framework import HTTPFrameworkAdapter
from hypertodo.monitoring import get_request_id

# Initialize adapter
http_adapter = HTTPFrameworkAdapter()
Request = http_adapter.Request
Response = http_adapter.Response
PlainTextResponse = http_adapter.PlainTextResponse
RequestValidationError = http_adapter.RequestValidationError

logger = logging.getLogger(__name__)


def _internal_error(request_id: str) -> Response:
    response = PlainTextResponse("Internal Server Error", status_code=500)
    if request_id != '-':
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Trace-ID"] = request_id
    return response


async def global_exception_handler(request: Request, exc: Exception) -> Response:
    """
    Global exception handler for unhandled exceptions.
    """
    request_id = get_request_id() or '-'
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        }
    )
    return _internal_error(request_id)


async def sqlite_exception_handler(request: Request, exc: sqlite3.Error) -> Response:
    """
    Handler for SQLite database errors.
    """
    request_id = get_request_id() or '-'
    logger.error(
        f"Database error in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        }
    )
    return _internal_error(request_id)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Log request validation errors, then answer with FastAPI's default 422.
    """
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    logger.warning(
        f"Validation error in {request.method} {request.url.path}: {', '.join(errors)}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "errors": errors,
        }
    )
    return await request_validation_exception_handler(request, exc)


def setup_exception_handlers(app):
    """
    Register exception handlers with the application.
    """
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(sqlite3.Error, sqlite_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
