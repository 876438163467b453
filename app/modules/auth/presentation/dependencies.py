# 📄 File: app/modules/auth/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Works out who is making a request (from the login cookie or an Authorization header),
# and blocks the admin-only actions for everyone except the collection owner.
#
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies for session resolution and access control. A missing, invalid or
# expired token resolves to an anonymous request; only the admin gates raise.
#
# 🔗 Dependencies:
# - FastAPI (Depends, Request, HTTPBearer)
# - app.modules.auth.infrastructure.external.supabase_auth
# - app.shared.config.settings (ADMIN_EMAIL)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.presentation.api.v1.* (admin endpoints)
# - app.modules.auth.presentation.api.v1.auth (me endpoint)

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.modules.auth.domain.models import is_admin_email
from app.modules.auth.infrastructure.external.supabase_auth import SupabaseAuthService
from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import get_supabase_manager
from app.shared.core.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"

# auto_error=False: anonymous browsing is allowed everywhere except admin actions
bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser:
    """User resolved from a Supabase access token."""

    def __init__(self, user_id: str, email: Optional[str], is_admin: bool = False):
        self.user_id = user_id
        self.email = email
        self.is_admin = is_admin

    def to_dict(self) -> Dict[str, Any]:
        return {"user_id": self.user_id, "email": self.email, "is_admin": self.is_admin}


def get_auth_service() -> SupabaseAuthService:
    return SupabaseAuthService(get_supabase_manager())


def extract_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Bearer header first, then the session cookie."""
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(ACCESS_TOKEN_COOKIE) or None


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: SupabaseAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> Optional[CurrentUser]:
    """
    Resolve the requesting user, or None for anonymous requests.

    Returns:
        Optional[CurrentUser]: None when no token is sent or the token is not accepted
    """
    token = extract_access_token(request, credentials)
    if not token:
        return None

    user = await auth_service.get_user(token)
    if user is None:
        logger.debug("Request carried an unusable access token; treating as anonymous")
        return None

    return CurrentUser(
        user_id=user.id,
        email=user.email,
        is_admin=is_admin_email(user.email, settings.admin_email),
    )


async def get_current_user(
    current_user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """
    Raises:
        AuthenticationError: anonymous request
    """
    if current_user is None:
        raise AuthenticationError("Login required")
    return current_user


async def get_current_admin_user(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """
    Get current user with admin privileges.

    Raises:
        AuthorizationError: logged in, but not the collection admin
    """
    if not current_user.is_admin:
        logger.warning(f"Non-admin user attempted admin access: {current_user.user_id}")
        raise AuthorizationError(
            "Admin privileges required for this action",
            required_permission="admin",
        )
    return current_user
