# 📄 File: app/modules/auth/infrastructure/external/supabase_auth.py
# 🧭 Purpose (Layman Explanation):
# Asks Supabase to check an email and password, and to tell us who a saved login key
# belongs to.
#
# 🧪 Purpose (Technical Summary):
# Adapter over Supabase Auth (GoTrue): password sign-in on a non-persisting client and
# access-token lookup. Provider messages are passed through verbatim; an unusable token
# resolves to "nobody" rather than an error.
#
# 🔗 Dependencies:
# - supabase (auth client, AuthError)
# - httpx (transport failures)
# - app.shared.config.supabase (client manager)
# - app.modules.auth.domain.models
#
# 🔄 Connected Modules / Calls From:
# - app.modules.auth.presentation.dependencies (get_auth_service, get_optional_user)
# - app.modules.auth.presentation.api.v1.auth (login)

import logging
from typing import Any, Optional

import httpx
from supabase import AuthError

from app.modules.auth.domain.models import AuthSession, AuthUser
from app.shared.config.supabase import SupabaseManager
from app.shared.core.exceptions import AuthenticationError, ExternalServiceError

logger = logging.getLogger(__name__)


class SupabaseAuthService:
    """
    Supabase Auth operations used by the API.

    Sign-in runs on a fresh client so a user's session never lands on the shared
    process-wide client.
    """

    def __init__(self, manager: SupabaseManager):
        self._manager = manager

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Args:
            email: Account email
            password: Account password

        Returns:
            AuthSession: user plus access/refresh tokens

        Raises:
            AuthenticationError: rejected credentials, with the provider message
            ExternalServiceError: Supabase Auth unreachable
        """
        client = self._manager.create_session_client()
        try:
            response = client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            logger.warning(f"Sign-in rejected for {email}: {e.message}")
            raise AuthenticationError(e.message) from e
        except httpx.HTTPError as e:
            logger.error(f"Supabase Auth unreachable during sign-in: {e}")
            raise ExternalServiceError(
                message=f"Supabase Auth is unreachable: {e}",
                service="supabase_auth",
            ) from e

        if response.session is None or response.user is None:
            raise AuthenticationError("Invalid login credentials")

        logger.info(f"User signed in: {response.user.id}")
        return AuthSession(
            user=self._to_user(response.user),
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
            expires_in=response.session.expires_in,
        )

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """
        Resolve an access token to its user, or None when the token is not usable.

        Raises:
            ExternalServiceError: Supabase Auth unreachable
        """
        try:
            response = self._manager.client.auth.get_user(access_token)
        except AuthError as e:
            logger.debug(f"Access token rejected: {e.message}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"Supabase Auth unreachable during token lookup: {e}")
            raise ExternalServiceError(
                message=f"Supabase Auth is unreachable: {e}",
                service="supabase_auth",
            ) from e

        if response is None or response.user is None:
            return None
        return self._to_user(response.user)

    @staticmethod
    def _to_user(user: Any) -> AuthUser:
        return AuthUser(id=str(user.id), email=getattr(user, "email", None))
