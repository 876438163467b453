# 📄 File: app/modules/auth/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Login web endpoints.
# 🧪 Purpose (Technical Summary):
# API package for the auth module.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
