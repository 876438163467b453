# 📄 File: app/modules/catalog/domain/repositories/plant_type_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for finding and saving plant types, without caring where they live
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantType entities following the Repository pattern
# 🔗 Dependencies:
# Domain models (PlantType), typing, abc
# 🔄 Connected Modules / Calls From:
# Catalog handlers, infrastructure implementation (Supabase), test fakes

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..models.plant_type import PlantType


class PlantTypeRepository(ABC):
    """
    Repository interface for PlantType data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (PlantType), not raw rows
    - Backend failures surface as RepositoryError carrying the provider message
    """

    @abstractmethod
    async def list_all(self) -> List[PlantType]:
        """
        Get every plant type ordered by genus, then cultivar.
        """
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[PlantType]:
        """
        Get plant type by its slug.

        Returns:
            PlantType if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_id(self, type_id: str) -> Optional[PlantType]:
        pass

    @abstractmethod
    async def get_by_ids(self, type_ids: Sequence[str]) -> List[PlantType]:
        """
        Batch lookup; unknown ids are simply absent from the result.
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> PlantType:
        """
        Insert a plant type.

        Args:
            values: Column values (genus, cultivar, variegation, slug, cover_image_url)

        Returns:
            Created PlantType with its generated id

        Raises:
            RepositoryError: If the insert is rejected
        """
        pass
