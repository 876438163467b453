# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the service is up and can reach Supabase,
# like a quick checkup for load balancers and monitoring.
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints; readiness performs one cheap query against the
# catalog table through the Supabase manager.
# 🔗 Dependencies:
# FastAPI, app.shared.config.supabase, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main.py, monitoring systems, load balancers

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.config.supabase import SupabaseManager, get_supabase_manager

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
)
async def health_check() -> JSONResponse:
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": "plantsbyjulie-api",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        },
    )


@health_router.get(
    "/health/live",
    summary="Liveness Probe",
    description="Returns 200 while the process is running",
)
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get(
    "/health/ready",
    summary="Readiness Probe",
    description="Returns 200 when Supabase answers a query, 503 otherwise",
)
async def readiness_probe(
    manager: SupabaseManager = Depends(get_supabase_manager),
) -> JSONResponse:
    supabase_health = manager.health_check()

    if supabase_health["database_service"]:
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": datetime.now().isoformat()},
        )

    logger.warning(f"Readiness probe failed: {supabase_health['error']}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": supabase_health["error"],
            "timestamp": datetime.now().isoformat(),
        },
    )
