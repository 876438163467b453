# 📄 File: app/modules/catalog/infrastructure/database/plant_type_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes plant types in the `plant_types` table on Supabase.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantTypeRepository over the Supabase PostgREST API,
# mapping rows to PlantType domain entities.
#
# 🔗 Dependencies:
# - app.modules.catalog.domain.repositories.plant_type_repository (interface)
# - app.modules.catalog.infrastructure.database.base (query execution, error mapping)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.infrastructure.database (dependency providers)

import logging
from typing import Any, Dict, List, Optional, Sequence

from app.modules.catalog.domain.models.plant_type import PlantType
from app.modules.catalog.domain.repositories.plant_type_repository import PlantTypeRepository
from .base import SupabaseTableRepository

logger = logging.getLogger(__name__)


class PlantTypeRepositoryImpl(SupabaseTableRepository, PlantTypeRepository):
    """
    Supabase implementation of the PlantTypeRepository interface.
    """

    table_name = "plant_types"
    columns = "id, genus, cultivar, variegation, slug, cover_image_url"

    async def list_all(self) -> List[PlantType]:
        rows = self._execute(
            self._select().order("genus").order("cultivar"),
            operation="list",
        )
        logger.debug(f"Fetched {len(rows)} plant types")
        return [PlantType.from_record(row) for row in rows]

    async def get_by_slug(self, slug: str) -> Optional[PlantType]:
        rows = self._execute(
            self._select().eq("slug", slug).limit(1),
            operation="get_by_slug",
        )
        return PlantType.from_record(rows[0]) if rows else None

    async def get_by_id(self, type_id: str) -> Optional[PlantType]:
        rows = self._execute(
            self._select().eq("id", type_id).limit(1),
            operation="get_by_id",
        )
        return PlantType.from_record(rows[0]) if rows else None

    async def get_by_ids(self, type_ids: Sequence[str]) -> List[PlantType]:
        if not type_ids:
            return []
        rows = self._execute(
            self._select().in_("id", list(type_ids)),
            operation="get_by_ids",
        )
        return [PlantType.from_record(row) for row in rows]

    async def create(self, values: Dict[str, Any]) -> PlantType:
        return PlantType.from_record(self._insert(values))
