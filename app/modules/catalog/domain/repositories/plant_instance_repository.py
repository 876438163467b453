# 📄 File: app/modules/catalog/domain/repositories/plant_instance_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for finding and saving the individual plants owned of each type
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantInstance entities following the Repository pattern
# 🔗 Dependencies:
# Domain models (PlantInstance), typing, abc
# 🔄 Connected Modules / Calls From:
# Catalog handlers, infrastructure implementation (Supabase), test fakes

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.plant_instance import PlantInstance


class PlantInstanceRepository(ABC):
    """
    Repository interface for PlantInstance data access operations.
    """

    @abstractmethod
    async def list_by_type(self, type_id: str) -> List[PlantInstance]:
        """
        Get the instances of one plant type, newest first.
        """
        pass

    @abstractmethod
    async def list_for_swap(self) -> List[PlantInstance]:
        """
        Get every instance marked for swap, newest first.
        """
        pass

    @abstractmethod
    async def get_by_id(self, instance_id: str) -> Optional[PlantInstance]:
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> PlantInstance:
        """
        Insert a plant instance and return it with its generated id.

        Raises:
            RepositoryError: If the insert is rejected
        """
        pass
