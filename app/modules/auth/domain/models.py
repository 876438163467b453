# 📄 File: app/modules/auth/domain/models.py
# 🧭 Purpose (Layman Explanation):
# Describes who is logged in and the keys their browser keeps, plus the rule that makes
# one email address the collection admin.
# 🧪 Purpose (Technical Summary):
# Frozen pydantic value objects mapped from Supabase Auth responses, and the
# case-insensitive ADMIN_EMAIL comparison.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# app.modules.auth.infrastructure.external.supabase_auth, app.modules.auth.presentation

from typing import Optional

from pydantic import BaseModel, ConfigDict


def is_admin_email(email: Optional[str], admin_email: Optional[str]) -> bool:
    """True when `email` matches the configured admin address, ignoring case."""
    if not email or not admin_email:
        return False
    return email.strip().lower() == admin_email.strip().lower()


class AuthUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None


class AuthSession(BaseModel):
    """Tokens issued by a successful password sign-in."""

    model_config = ConfigDict(frozen=True)

    user: AuthUser
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
