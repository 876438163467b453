# 📄 File: app/modules/catalog/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the rules of the collection: what a plant kind, a plant and a photo are, how the
# list is searched, and in what order photos are shown.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting entities, pure domain services and repository
# interfaces for the catalog.
# 🔗 Dependencies:
# Domain models, services and repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer

from .models.plant_type import PlantType, build_type_slug, display_name_for
from .models.plant_instance import PlantInstance
from .models.plant_photo import PlantPhoto

from .services.catalog_filter import filter_plants, genus_facets
from .services.photo_sequencer import PhotoSequencer, sort_photos

from .repositories.plant_type_repository import PlantTypeRepository
from .repositories.plant_instance_repository import PlantInstanceRepository
from .repositories.plant_photo_repository import PlantPhotoRepository

__all__ = [
    "PlantType",
    "PlantInstance",
    "PlantPhoto",
    "build_type_slug",
    "display_name_for",
    "filter_plants",
    "genus_facets",
    "PhotoSequencer",
    "sort_photos",
    "PlantTypeRepository",
    "PlantInstanceRepository",
    "PlantPhotoRepository",
]
