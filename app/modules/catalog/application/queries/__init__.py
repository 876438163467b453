# 📄 File: app/modules/catalog/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# The read-only questions visitors can ask about the collection.
# 🧪 Purpose (Technical Summary):
# Read-side query definitions.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# query_handlers.py, presentation routers

from .list_plant_types import ListPlantTypesQuery
from .get_plant_type_detail import GetPlantTypeDetailQuery
from .list_swap_instances import ListSwapInstancesQuery
from .get_photo_carousel import CarouselMove, GetPhotoCarouselQuery

__all__ = [
    "ListPlantTypesQuery",
    "GetPlantTypeDetailQuery",
    "ListSwapInstancesQuery",
    "GetPhotoCarouselQuery",
    "CarouselMove",
]
