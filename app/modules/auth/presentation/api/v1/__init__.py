# 📄 File: app/modules/auth/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the login endpoints.
# 🧪 Purpose (Technical Summary):
# Exposes the v1 auth router and its rate limiter.
# 🔗 Dependencies:
# auth.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main (limiter registration)

from .auth import auth_router, limiter

__all__ = ["auth_router", "limiter"]
