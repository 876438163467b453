# 📄 File: app/modules/catalog/infrastructure/database/plant_photo_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes plant photos in the `plant_photos` table on Supabase, and stars a photo.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantPhotoRepository over the Supabase PostgREST API. The
# featured-photo write is a single RPC into the `set_featured_photo` Postgres function,
# which clears and sets the flag inside one transaction.
#
# 🔗 Dependencies:
# - app.modules.catalog.domain.repositories.plant_photo_repository (interface)
# - app.modules.catalog.infrastructure.database.base (query execution, error mapping)
# - migrations/001_plant_catalog.sql (set_featured_photo definition)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.infrastructure.database (dependency providers)

import logging
from typing import Any, Dict, List, Sequence

from app.modules.catalog.domain.models.plant_photo import PlantPhoto
from app.modules.catalog.domain.repositories.plant_photo_repository import PlantPhotoRepository
from app.shared.core.exceptions import RepositoryError
from .base import SupabaseTableRepository

logger = logging.getLogger(__name__)

SET_FEATURED_FUNCTION = "set_featured_photo"


class PlantPhotoRepositoryImpl(SupabaseTableRepository, PlantPhotoRepository):
    """
    Supabase implementation of the PlantPhotoRepository interface.
    """

    table_name = "plant_photos"
    columns = "id, instance_id, url, caption, taken_at, created_at, is_featured"

    async def list_by_instance(self, instance_id: str) -> List[PlantPhoto]:
        rows = self._execute(
            self._select().eq("instance_id", instance_id),
            operation="list_by_instance",
            lookup=True,
        )
        return [PlantPhoto.from_record(row) for row in rows]

    async def list_by_instances(self, instance_ids: Sequence[str]) -> List[PlantPhoto]:
        if not instance_ids:
            return []
        rows = self._execute(
            self._select().in_("instance_id", list(instance_ids)),
            operation="list_by_instances",
            lookup=True,
        )
        return [PlantPhoto.from_record(row) for row in rows]

    async def create(self, values: Dict[str, Any]) -> PlantPhoto:
        return PlantPhoto.from_record(self._insert(values))

    async def set_featured(self, instance_id: str, photo_id: str) -> None:
        rows = self._execute(
            self._admin_client.rpc(
                SET_FEATURED_FUNCTION,
                {"p_instance_id": instance_id, "p_photo_id": photo_id},
            ),
            operation="set_featured",
        )
        if rows and rows[0] is False:
            raise RepositoryError(
                message=f"Photo {photo_id} does not belong to instance {instance_id}",
                operation="set_featured",
                entity=self.table_name,
            )
        logger.info(f"Featured photo {photo_id} for instance {instance_id}")
