# 📄 File: app/modules/catalog/domain/repositories/plant_photo_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for finding and saving plant photos and for starring one of them
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantPhoto entities, including the atomic featured-photo write
# 🔗 Dependencies:
# Domain models (PlantPhoto), typing, abc
# 🔄 Connected Modules / Calls From:
# Catalog handlers, infrastructure implementation (Supabase), test fakes

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from ..models.plant_photo import PlantPhoto


class PlantPhotoRepository(ABC):
    """
    Repository interface for PlantPhoto data access operations.

    Implementation Notes:
    - Listing order is not significant; callers order with sort_photos
    - set_featured must be all-or-nothing: after it returns, exactly one photo
      of the instance is featured; when it raises, nothing was changed
    """

    @abstractmethod
    async def list_by_instance(self, instance_id: str) -> List[PlantPhoto]:
        pass

    @abstractmethod
    async def list_by_instances(self, instance_ids: Sequence[str]) -> List[PlantPhoto]:
        """
        Batch lookup of photos for several instances.
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> PlantPhoto:
        """
        Insert a photo row (instance_id, url, optional caption/taken_at).

        Raises:
            RepositoryError: If the insert is rejected
        """
        pass

    @abstractmethod
    async def set_featured(self, instance_id: str, photo_id: str) -> None:
        """
        Clear the featured flag on every photo of the instance and set it on one,
        as a single atomic update.

        Raises:
            RepositoryError: If the update is rejected; remote state is unchanged
        """
        pass
