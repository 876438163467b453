# 📄 File: app/modules/auth/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for logging in, logging out, and asking "am I logged in, and am I
# the admin?".
#
# 🧪 Purpose (Technical Summary):
# FastAPI auth endpoints over Supabase Auth. Login sets httponly session cookies and is
# rate limited with slowapi; logout clears them; /me reports the resolved session.
#
# 🔗 Dependencies:
# - FastAPI router, Request/Response
# - slowapi for rate limiting
# - app.modules.auth.infrastructure.external.supabase_auth
# - app.modules.auth.presentation.dependencies (session resolution, cookie names)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/auth)
# - app.main (limiter registered on app.state)

"""
Authentication API Endpoints

Endpoints:
- POST /login: Email/password sign-in; sets sb-access-token / sb-refresh-token cookies
- POST /logout: Clears the session cookies
- GET /me: Login and admin status of the current request
"""

import logging
from http.cookies import CookieError
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.modules.auth.domain.models import AuthSession, is_admin_email
from app.modules.auth.infrastructure.external.supabase_auth import SupabaseAuthService
from app.modules.auth.presentation.api.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    MeResponse,
    UserSchema,
)
from app.modules.auth.presentation.dependencies import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    CurrentUser,
    get_auth_service,
    get_optional_user,
)
from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)

# Rate limiting configuration
limiter = Limiter(key_func=get_remote_address)

# Create router
auth_router = APIRouter()

LOGIN_NOTICE = "Logged in. Redirecting…"
LOGOUT_NOTICE = "Logged out"


def login_rate_limit() -> str:
    return get_settings().LOGIN_RATE_LIMIT


def set_session_cookies(response: Response, session: AuthSession) -> None:
    """Write the session cookies; a cookie that cannot be written is skipped."""
    settings = get_settings()
    cookies = [(ACCESS_TOKEN_COOKIE, session.access_token)]
    if session.refresh_token:
        cookies.append((REFRESH_TOKEN_COOKIE, session.refresh_token))

    for name, value in cookies:
        try:
            response.set_cookie(
                key=name,
                value=value,
                max_age=session.expires_in,
                path="/",
                secure=settings.SESSION_COOKIE_SECURE,
                httponly=True,
                samesite="lax",
            )
        except CookieError as e:
            logger.debug(f"Could not write cookie {name}: {e}")


@auth_router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in with email and password",
    description="Sign in through Supabase Auth and store the session in httponly cookies",
    responses={
        200: {"description": "Logged in"},
        401: {"description": "Credentials rejected; message from Supabase Auth"},
        422: {"description": "Validation error"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(login_rate_limit)
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: SupabaseAuthService = Depends(get_auth_service),
) -> LoginResponse:
    logger.info(f"Login attempt for {credentials.email}")
    session = await auth_service.sign_in(credentials.email, credentials.password)
    set_session_cookies(response, session)

    return LoginResponse(
        user=UserSchema(id=session.user.id, email=session.user.email),
        is_admin=is_admin_email(session.user.email, get_settings().admin_email),
        notice=LOGIN_NOTICE,
        redirect_to="/",
    )


@auth_router.post(
    "/logout",
    response_model=LogoutResponse,
    status_code=status.HTTP_200_OK,
    summary="Log out",
    description="Clear the session cookies",
)
async def logout(response: Response) -> LogoutResponse:
    for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(key=name, path="/")
    return LogoutResponse(notice=LOGOUT_NOTICE, redirect_to="/")


@auth_router.get(
    "/me",
    response_model=MeResponse,
    summary="Current session",
    description="Whether the request carries a valid session, and whether it is the admin",
)
async def me(
    current_user: Optional[CurrentUser] = Depends(get_optional_user),
) -> MeResponse:
    if current_user is None:
        return MeResponse(is_logged_in=False)
    return MeResponse(
        is_logged_in=True,
        is_admin=current_user.is_admin,
        email=current_user.email,
    )
