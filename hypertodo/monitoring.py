"""
Monitoring and observability utilities for the to-do service.

Provides:
- Prometheus metrics (requests, latencies, errors)
- Request tracing (unique request IDs)
- Health reporting with a database connectivity check
"""
import time
import uuid
import logging
from typing import Any, Callable, Dict
from contextvars import ContextVar

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from prometheus_client import Counter, Histogram, Gauge, generate_latest

# Request context variable for tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Prometheus metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint', 'status_code'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_errors_total = Counter(
    'http_errors_total',
    'Total number of HTTP errors',
    ['method', 'endpoint', 'status_code', 'error_type']
)

service_uptime_seconds = Gauge(
    'service_uptime_seconds',
    'Service uptime in seconds'
)

service_start_time = time.time()

logger = logging.getLogger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get('')


def set_request_id(request_id: str) -> None:
    """Set the request ID in context."""
    request_id_var.set(request_id)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for collecting Prometheus metrics and request tracing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        set_request_id(request_id)

        start_time = time.time()
        service_uptime_seconds.set(time.time() - service_start_time)

        logger.debug(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else None,
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            endpoint = self._get_endpoint_label(request)
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            logger.error(
                f"Request failed with exception: {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "status_code": status_code,
                    "duration_seconds": duration,
                    "exception_type": type(e).__name__,
                }
            )
            http_errors_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=status_code,
                error_type="exception"
            ).inc()
            # Re-raise to let the exception handlers build the response
            raise

        status_code = response.status_code
        duration = time.time() - start_time
        endpoint = self._get_endpoint_label(request)
        logger.info(
            f"{request.method} {request.url.path} - {status_code} - {duration:.3f}s",
            extra={"request_id": request_id}
        )

        http_requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=status_code
        ).inc()
        http_request_duration_seconds.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=status_code
        ).observe(duration)

        if status_code >= 400:
            error_type = "client_error" if status_code < 500 else "server_error"
            http_errors_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=status_code,
                error_type=error_type
            ).inc()

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Trace-ID"] = request_id
        return response

    @staticmethod
    def _get_endpoint_label(request: Request) -> str:
        """Label a request by its route template so IDs do not add series."""
        route = request.scope.get("route")
        path = getattr(route, "path", None)
        return path if path else UNMATCHED_ENDPOINT


def get_metrics() -> str:
    """Get Prometheus metrics in text format."""
    return generate_latest().decode('utf-8')


def check_database_health(storage) -> Dict[str, Any]:
    """
    Check database connectivity.

    Args:
        storage: TodoStorage instance

    Returns:
        Dictionary with database health status
    """
    start_time = time.time()
    try:
        storage.ping()
    except Exception as e:
        response_time_ms = round((time.time() - start_time) * 1000, 2)
        logger.warning(
            f"Database health check failed: {e}",
            extra={"error_type": type(e).__name__, "response_time_ms": response_time_ms}
        )
        return {
            "status": "unhealthy",
            "connectivity": "disconnected",
            "response_time_ms": response_time_ms,
            "error": str(e),
            "error_type": type(e).__name__
        }

    return {
        "status": "healthy",
        "connectivity": "connected",
        "response_time_ms": round((time.time() - start_time) * 1000, 2),
        "type": "sqlite"
    }


def get_health_info(storage=None) -> Dict[str, Any]:
    """
    Get health information including uptime and component status.

    Args:
        storage: Optional storage instance for the database check

    Returns:
        Dictionary with health information including component statuses
    """
    uptime = time.time() - service_start_time
    components = {
        "service": {
            "status": "healthy",
            "uptime_seconds": uptime,
        }
    }
    overall_status = "healthy"

    if storage is not None:
        db_health = check_database_health(storage)
        components["database"] = db_health
        if db_health["status"] == "unhealthy":
            overall_status = "unhealthy"

    return {
        "status": overall_status,
        "service": "hypertodo",
        "timestamp": time.time(),
        "uptime_seconds": uptime,
        "uptime_formatted": _format_uptime(uptime),
        "components": components
    }


def _format_uptime(seconds: float) -> str:
    """Format uptime in human-readable format."""
    days = int(seconds // 86400)
    hours = int((seconds % 86400) // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if days > 0:
        return f"{days}d {hours}h {minutes}m {secs}s"
    elif hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    elif minutes > 0:
        return f"{minutes}m {secs}s"
    else:
        return f"{secs}s"
