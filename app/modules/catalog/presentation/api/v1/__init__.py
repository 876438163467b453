# 📄 File: app/modules/catalog/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the catalog endpoints.
# 🧪 Purpose (Technical Summary):
# Exposes the v1 catalog routers.
# 🔗 Dependencies:
# plants.py, instances.py, swap.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .plants import plants_router
from .instances import instances_router
from .swap import swap_router

__all__ = ["plants_router", "instances_router", "swap_router"]
