"""
Supabase client configuration for authentication, tables and storage.
Handles Supabase initialization with proper error handling and connection management.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from .settings import get_settings

logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager.

    Holds two lazily created clients: the public one (anon key) used for
    reads and session checks, and the privileged one (service role key,
    falling back to the anon key) used for administrative writes.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self._admin_client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create the public Supabase client."""
        if self._client is None:
            self._client = self._create_client(self.settings.SUPABASE_ANON_KEY)
        return self._client

    @property
    def admin_client(self) -> Client:
        """Get or create the client used for administrative writes."""
        if self._admin_client is None:
            key = self.settings.SUPABASE_SERVICE_ROLE_KEY or self.settings.SUPABASE_ANON_KEY
            self._admin_client = self._create_client(key)
        return self._admin_client

    def create_session_client(self) -> Client:
        """
        Create a throwaway client for a single sign-in.

        Signing in stores the session on the client, so sharing one client
        between requests would leak sessions across users.
        """
        return self._create_client(self.settings.SUPABASE_ANON_KEY, persist_session=False)

    def _create_client(self, key: str, persist_session: bool = False) -> Client:
        """Create Supabase client with proper configuration."""
        try:
            client_options = ClientOptions(
                schema="public",
                headers={
                    "User-Agent": f"PlantsByJulie/{self.settings.APP_VERSION}",
                },
                auto_refresh_token=False,
                persist_session=persist_session,
            )

            client = create_client(
                supabase_url=self.settings.SUPABASE_URL,
                supabase_key=key,
                options=client_options
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ConnectionError(f"Supabase initialization failed: {e}")

    def health_check(self) -> dict:
        """
        Perform a cheap round trip against the catalog table.

        Returns:
            dict: Health status of the Supabase connection
        """
        health_status = {"database_service": False, "error": None}

        try:
            self.client.table("plant_types").select("id").limit(1).execute()
            health_status["database_service"] = True
        except Exception as e:
            error_msg = f"Supabase health check failed: {e}"
            logger.error(error_msg)
            health_status["error"] = error_msg

        return health_status

    def close(self):
        """Drop cached clients."""
        if self._client or self._admin_client:
            self._client = None
            self._admin_client = None
            logger.info("Supabase client connections closed")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Singleton Supabase manager
    """
    return SupabaseManager()


def get_supabase_client() -> Client:
    """Get the public Supabase client."""
    return get_supabase_manager().client


def get_supabase_admin_client() -> Client:
    """Get the Supabase client used for administrative writes."""
    return get_supabase_manager().admin_client


async def cleanup_supabase():
    """Cleanup Supabase connections on application shutdown."""
    get_supabase_manager().close()
    logger.info("Supabase cleanup completed")
