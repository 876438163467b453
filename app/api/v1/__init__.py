# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API, so later versions can be added without
# breaking existing clients of the plant collection.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes, OpenAPI tags
# and the info payload served at /api/v1/.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
PlantsByJulie API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers live in app/modules/*/presentation/api/v1.
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "PlantsByJulie collection API version 1",
    "features": ["catalog", "photos", "swap_list", "auth"],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "auth": "/auth",
    "plants": "/plants",
    "instances": "/instances",
    "swap": "/swap",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {"name": "Authentication", "description": "Login, logout and session status"},
    {"name": "Plants", "description": "Plant types, their instances and admin creation"},
    {"name": "Instances", "description": "Instance photos, carousel and featured photo"},
    {"name": "Swap", "description": "Plants available for swap"},
    {"name": "Health Check", "description": "System health and status monitoring"},
]


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information and configuration

    Returns:
        Dictionary with API v1 metadata and configuration
    """
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }


__all__ = ["API_V1_CONFIG", "ROUTE_PREFIXES", "API_TAGS", "get_api_info"]
