"""
Health and metrics API routes.
"""
from prometheus_client import CONTENT_TYPE_LATEST

from hypertodo.adapters.http_framework import HTTPFrameworkAdapter
from hypertodo.dependencies.services import ServiceContainer, get_services
from hypertodo.monitoring import get_health_info, get_metrics

http_adapter = HTTPFrameworkAdapter()
Response = http_adapter.Response
JSONResponse = http_adapter.JSONResponse
Depends = http_adapter.Depends

router = http_adapter.create_router(tags=["health"])


@router.get("/health")
async def health_check(services: ServiceContainer = Depends(get_services)):
    """Health check with service uptime and database connectivity."""
    health_info = get_health_info(services.storage)
    if health_info.get("status") == "unhealthy":
        return JSONResponse(content=health_info, status_code=503)
    return health_info


@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
