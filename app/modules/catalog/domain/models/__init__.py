# 📄 File: app/modules/catalog/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the three record kinds of the collection in one place.
# 🧪 Purpose (Technical Summary):
# Re-exports the frozen pydantic domain entities.
# 🔗 Dependencies:
# plant_type.py, plant_instance.py, plant_photo.py
# 🔄 Connected Modules / Calls From:
# Repositories, services, handlers

from .plant_type import PlantType
from .plant_instance import PlantInstance
from .plant_photo import PlantPhoto

__all__ = ["PlantType", "PlantInstance", "PlantPhoto"]
