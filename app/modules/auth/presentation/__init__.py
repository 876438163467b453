# 📄 File: app/modules/auth/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The login web endpoints and the "who is asking?" checks used by other endpoints.
# 🧪 Purpose (Technical Summary):
# Presentation layer for auth: FastAPI router, schemas and request-scoped dependencies.
# 🔗 Dependencies:
# FastAPI, slowapi, pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, catalog routers
