# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: the web addresses of the catalog and the shared
# request plumbing (logging, error replies) live under it.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer: versioned routers, health probes and
# HTTP middleware for the FastAPI application.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main

"""
PlantsByJulie API Package

Structure:
    api/
    ├── middleware/          # Request logging and the error envelope
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/
        ├── router.py        # Mounts the auth, plants, instances and swap routers
        └── health.py        # Liveness and readiness probes
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

__all__ = ["API_PREFIX", "CURRENT_VERSION", "SUPPORTED_VERSIONS"]
