# 📄 File: app/modules/catalog/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the answers the catalog hands back to the web layer.
# 🧪 Purpose (Technical Summary):
# Result DTOs produced by handlers and used directly as FastAPI response models.
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# command_handlers.py, query_handlers.py, presentation routers

from .catalog_dto import (
    CarouselDTO,
    InstanceCardDTO,
    InstanceCreatedDTO,
    MutationResultDTO,
    PhotosAddedDTO,
    PlantDetailDTO,
    PlantListDTO,
    PlantTypeCreatedDTO,
    PlantTypeSummaryDTO,
    SwapListDTO,
)

__all__ = [
    "CarouselDTO",
    "InstanceCardDTO",
    "InstanceCreatedDTO",
    "MutationResultDTO",
    "PhotosAddedDTO",
    "PlantDetailDTO",
    "PlantListDTO",
    "PlantTypeCreatedDTO",
    "PlantTypeSummaryDTO",
    "SwapListDTO",
]
