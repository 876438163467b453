# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for API version 1, sending plant requests to the
# catalog and login requests to the auth module.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the module routers under their prefixes,
# plus the v1 info endpoint.
# 🔗 Dependencies:
# FastAPI, app.modules.catalog.presentation.api.v1, app.modules.auth.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.auth.presentation.api.v1 import auth_router
from app.modules.catalog.presentation.api.v1 import instances_router, plants_router, swap_router

from . import ROUTE_PREFIXES, get_api_info

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()


@api_v1_router.get(
    "/",
    summary="API v1 Information",
    description="Get API v1 version information and available route prefixes",
    tags=["API Info"],
)
async def api_v1_info() -> dict:
    return get_api_info()


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(auth_router, prefix=ROUTE_PREFIXES["auth"], tags=["Authentication"])
api_v1_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=["Plants"])
api_v1_router.include_router(instances_router, prefix=ROUTE_PREFIXES["instances"], tags=["Instances"])
api_v1_router.include_router(swap_router, prefix=ROUTE_PREFIXES["swap"], tags=["Swap"])

logger.debug(f"API v1 routes registered: {sorted(ROUTE_PREFIXES.values())}")
