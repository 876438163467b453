# 📄 File: app/modules/catalog/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Describes what the catalog needs from storage, without saying which database does it.
# 🧪 Purpose (Technical Summary):
# Abstract repository interfaces implemented in the infrastructure layer.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# app.modules.catalog.infrastructure.database, application handlers

from .plant_type_repository import PlantTypeRepository
from .plant_instance_repository import PlantInstanceRepository
from .plant_photo_repository import PlantPhotoRepository

__all__ = ["PlantTypeRepository", "PlantInstanceRepository", "PlantPhotoRepository"]
