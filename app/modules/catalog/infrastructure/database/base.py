# 📄 File: app/modules/catalog/infrastructure/database/base.py
# 🧭 Purpose (Layman Explanation):
# Shared plumbing for talking to the Supabase tables, so every repository reports
# backend problems the same way.
# 🧪 Purpose (Technical Summary):
# Base class for PostgREST-backed repositories: holds the read and write clients and turns
# postgrest APIError / httpx transport failures into RepositoryError with the provider message.
# 🔗 Dependencies:
# supabase (Client), postgrest (APIError), httpx, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# plant_type_repository_impl.py, plant_instance_repository_impl.py, plant_photo_repository_impl.py

import logging
from typing import Any, Dict, List, Optional

import httpx
from postgrest import APIError
from supabase import Client

from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)

# Postgres invalid_text_representation, raised for an id that is not a valid uuid
INVALID_TEXT_REPRESENTATION = "22P02"


class SupabaseTableRepository:
    """
    Common base for repositories over one Supabase table.

    Reads go through the public client; inserts and updates go through the
    administrative client, since only the collection admin writes.
    """

    table_name: str = ""
    columns: str = "*"

    def __init__(self, client: Client, admin_client: Optional[Client] = None):
        self._client = client
        self._admin_client = admin_client or client

    def _select(self):
        return self._client.table(self.table_name).select(self.columns)

    def _execute(self, query, operation: str, lookup: bool = False) -> List[Dict[str, Any]]:
        """
        Run a built PostgREST query and return its rows.

        Args:
            query: Built PostgREST request
            operation: Name used in logs and error details
            lookup: Read keyed by id; a malformed id matches no rows

        Raises:
            RepositoryError: carrying the provider message verbatim
        """
        try:
            response = query.execute()
        except APIError as e:
            if lookup and e.code == INVALID_TEXT_REPRESENTATION:
                logger.debug(f"Malformed id in {operation} on {self.table_name}: {e.message}")
                return []
            logger.error(f"Supabase rejected {operation} on {self.table_name}: {e.message}")
            raise RepositoryError(
                message=e.message or str(e),
                operation=operation,
                entity=self.table_name,
                details={"provider_code": e.code} if e.code else None,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Supabase unreachable during {operation} on {self.table_name}: {e}")
            raise RepositoryError(
                message=f"Supabase is unreachable: {e}",
                operation=operation,
                entity=self.table_name,
            ) from e

        data = getattr(response, "data", None)
        if data is None or data == "":
            return []
        if isinstance(data, list):
            return data
        return [data]

    def _insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        rows = self._execute(
            self._admin_client.table(self.table_name).insert(values),
            operation="insert",
        )
        if not rows:
            raise RepositoryError(
                message=f"Insert into {self.table_name} returned no row",
                operation="insert",
                entity=self.table_name,
            )
        logger.info(f"Inserted row {rows[0].get('id')} into {self.table_name}")
        return rows[0]
