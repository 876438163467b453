# 📄 File: app/modules/auth/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shapes of login requests and answers.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the auth endpoints.
# 🔗 Dependencies:
# auth_schemas.py
# 🔄 Connected Modules / Calls From:
# app.modules.auth.presentation.api.v1.auth

from .auth_schemas import LoginRequest, LoginResponse, LogoutResponse, MeResponse, UserSchema

__all__ = ["LoginRequest", "LoginResponse", "LogoutResponse", "MeResponse", "UserSchema"]
