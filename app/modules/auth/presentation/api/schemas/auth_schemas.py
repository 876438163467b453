# 📄 File: app/modules/auth/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the login form sends and what the service answers after logging in or out.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the auth endpoints. Tokens travel in httponly
# cookies, not in response bodies.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.auth.presentation.api.v1.auth

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Email/password sign-in."""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, max_length=200, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "julie@example.com", "password": "correct horse battery staple"}
        }
    )


class UserSchema(BaseModel):
    id: str
    email: Optional[str] = None


class LoginResponse(BaseModel):
    user: UserSchema
    is_admin: bool
    notice: str
    redirect_to: str


class LogoutResponse(BaseModel):
    notice: str
    redirect_to: str


class MeResponse(BaseModel):
    is_logged_in: bool
    is_admin: bool = False
    email: Optional[str] = None
