# 📄 File: app/modules/catalog/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "action processors" that answer catalog questions and carry out admin actions.
#
# 🧪 Purpose (Technical Summary):
# CQRS handler package: query handlers for reads, command handlers for writes. Each handler
# is a FastAPI class dependency whose repositories and storage are injected.
#
# 🔗 Dependencies:
# - app.modules.catalog.application.commands / queries / dto
# - app.modules.catalog.infrastructure.database (repository providers)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.presentation.api.v1 (API endpoints invoke handlers)

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.catalog.application.handlers.command_handlers import (
        AddInstancePhotosCommandHandler,
        CreatePlantInstanceCommandHandler,
        CreatePlantTypeCommandHandler,
        SetFeaturedPhotoCommandHandler,
    )
    from app.modules.catalog.application.handlers.query_handlers import (
        GetPhotoCarouselQueryHandler,
        GetPlantTypeDetailQueryHandler,
        ListPlantTypesQueryHandler,
        ListSwapInstancesQueryHandler,
    )

__all__ = [
    "CreatePlantTypeCommandHandler",
    "CreatePlantInstanceCommandHandler",
    "AddInstancePhotosCommandHandler",
    "SetFeaturedPhotoCommandHandler",
    "ListPlantTypesQueryHandler",
    "GetPlantTypeDetailQueryHandler",
    "ListSwapInstancesQueryHandler",
    "GetPhotoCarouselQueryHandler",
]
