# 📄 File: app/modules/catalog/infrastructure/database/plant_instance_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes the owned plants in the `plant_instances` table on Supabase.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantInstanceRepository over the Supabase PostgREST API.
#
# 🔗 Dependencies:
# - app.modules.catalog.domain.repositories.plant_instance_repository (interface)
# - app.modules.catalog.infrastructure.database.base (query execution, error mapping)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.infrastructure.database (dependency providers)

from typing import Any, Dict, List, Optional

from app.modules.catalog.domain.models.plant_instance import PlantInstance
from app.modules.catalog.domain.repositories.plant_instance_repository import PlantInstanceRepository
from .base import SupabaseTableRepository


class PlantInstanceRepositoryImpl(SupabaseTableRepository, PlantInstanceRepository):
    """
    Supabase implementation of the PlantInstanceRepository interface.
    """

    table_name = "plant_instances"
    columns = (
        "id, type_id, acquired_at, price, currency, size_type, size_note, "
        "seller_name, source_type, notes, plant_number, for_swap, created_at"
    )

    async def list_by_type(self, type_id: str) -> List[PlantInstance]:
        rows = self._execute(
            self._select().eq("type_id", type_id).order("created_at", desc=True),
            operation="list_by_type",
        )
        return [PlantInstance.from_record(row) for row in rows]

    async def list_for_swap(self) -> List[PlantInstance]:
        rows = self._execute(
            self._select().eq("for_swap", True).order("created_at", desc=True),
            operation="list_for_swap",
        )
        return [PlantInstance.from_record(row) for row in rows]

    async def get_by_id(self, instance_id: str) -> Optional[PlantInstance]:
        rows = self._execute(
            self._select().eq("id", instance_id).limit(1),
            operation="get_by_id",
            lookup=True,
        )
        return PlantInstance.from_record(rows[0]) if rows else None

    async def create(self, values: Dict[str, Any]) -> PlantInstance:
        return PlantInstance.from_record(self._insert(values))
