# 📄 File: app/modules/catalog/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for browsing the collection and for the admin's add/upload actions.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers for plants, instances/photos and the swap list, plus
# upload-reading dependencies. Handler DTOs double as response models.
#
# 🔗 Dependencies:
# - FastAPI for routing and multipart parsing (python-multipart)
# - app.modules.catalog.application (handlers, commands, queries, DTOs)
# - app.modules.auth.presentation.dependencies (admin gate)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
