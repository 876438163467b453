# 📄 File: app/modules/catalog/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the plant grid (with search and genus filter), a plant's own page,
# and the admin forms that add a plant kind or an owned plant.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for PlantType reads and the admin multipart writes (type + cover, instance
# + optional image). Reads are public; writes require the admin session.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File (python-multipart)
# - app.modules.catalog.application.handlers (query and command handlers)
# - app.modules.auth.presentation.dependencies (get_current_admin_user)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plants)

"""
Plant API Endpoints

Endpoints:
- GET /: Filtered plant grid and genus facets
- POST /: Create a plant type with its cover image (admin)
- GET /{slug}: Plant type page with instances and ordered photos
- POST /{slug}/instances: Add an owned plant (admin)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from app.modules.auth.presentation.dependencies import CurrentUser, get_current_admin_user
from app.modules.catalog.application.commands.create_plant_instance import CreatePlantInstanceCommand
from app.modules.catalog.application.commands.create_plant_type import CreatePlantTypeCommand
from app.modules.catalog.application.dto.catalog_dto import (
    InstanceCreatedDTO,
    PlantDetailDTO,
    PlantListDTO,
    PlantTypeCreatedDTO,
)
from app.modules.catalog.application.handlers.command_handlers import (
    CreatePlantInstanceCommandHandler,
    CreatePlantTypeCommandHandler,
)
from app.modules.catalog.application.handlers.query_handlers import (
    GetPlantTypeDetailQueryHandler,
    ListPlantTypesQueryHandler,
)
from app.modules.catalog.application.queries.get_plant_type_detail import GetPlantTypeDetailQuery
from app.modules.catalog.application.queries.list_plant_types import ListPlantTypesQuery
from app.modules.catalog.domain.models.plant_instance import (
    DEFAULT_CURRENCY,
    DEFAULT_SIZE_TYPE,
    DEFAULT_SOURCE_TYPE,
)
from app.modules.catalog.domain.services.catalog_filter import ALL_GENERA
from app.modules.catalog.presentation.dependencies import read_upload
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

plants_router = APIRouter()

ADMIN_RESPONSES = {
    401: {"description": "Login required"},
    403: {"description": "Admin privileges required"},
    413: {"description": "Image too large"},
    415: {"description": "Not an image"},
    422: {"description": "Validation error"},
    502: {"description": "Supabase rejected the write; message passed through"},
}


@plants_router.get(
    "",
    response_model=PlantListDTO,
    summary="List plant types",
    description="All plant types (genus, then cultivar), filtered by free text and genus",
)
async def list_plants(
    q: str = Query(default="", max_length=200, description="Free-text search"),
    genus: str = Query(default=ALL_GENERA, description="Exact genus, or 'all'"),
    handler: ListPlantTypesQueryHandler = Depends(),
) -> PlantListDTO:
    return await handler.handle(ListPlantTypesQuery(query=q, genus=genus))


@plants_router.post(
    "",
    response_model=PlantTypeCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create plant type",
    description="Create a plant type and upload its cover image (admin only)",
    responses={**ADMIN_RESPONSES, 409: {"description": "Slug already exists"}},
)
async def create_plant(
    admin: CurrentUser = Depends(get_current_admin_user),
    genus: str = Form(...),
    cultivar: str = Form(...),
    variegation: Optional[str] = Form(None),
    slug: Optional[str] = Form(None, description="Optional slug override"),
    cover_image: Optional[UploadFile] = File(None),
    handler: CreatePlantTypeCommandHandler = Depends(),
) -> PlantTypeCreatedDTO:
    image = await read_upload(cover_image)
    if image is None:
        raise ValidationError(message="A cover image is required", field="cover_image")

    command = CreatePlantTypeCommand(
        genus=genus,
        cultivar=cultivar,
        variegation=variegation,
        slug_override=slug,
        cover_image=image,
    )
    logger.info(f"Admin {admin.user_id} creating plant type {command.slug}")
    return await handler.handle(command)


@plants_router.get(
    "/{slug}",
    response_model=PlantDetailDTO,
    summary="Plant type detail",
    description="One plant type with its instances (newest first) and their ordered photos",
    responses={404: {"description": "Unknown slug"}},
)
async def get_plant(
    slug: str,
    handler: GetPlantTypeDetailQueryHandler = Depends(),
) -> PlantDetailDTO:
    return await handler.handle(GetPlantTypeDetailQuery(slug=slug))


@plants_router.post(
    "/{slug}/instances",
    response_model=InstanceCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add plant instance",
    description="Add an owned plant under a plant type, with an optional first photo (admin only)",
    responses={**ADMIN_RESPONSES, 404: {"description": "Unknown slug"}},
)
async def create_instance(
    slug: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    acquired_at: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    currency: str = Form(DEFAULT_CURRENCY),
    size_type: str = Form(DEFAULT_SIZE_TYPE),
    size_note: Optional[str] = Form(None),
    seller_name: Optional[str] = Form(None),
    source_type: str = Form(DEFAULT_SOURCE_TYPE),
    notes: Optional[str] = Form(None),
    plant_number: Optional[str] = Form(None),
    for_swap: bool = Form(False),
    image: Optional[UploadFile] = File(None),
    handler: CreatePlantInstanceCommandHandler = Depends(),
) -> InstanceCreatedDTO:
    command = CreatePlantInstanceCommand(
        type_slug=slug,
        acquired_at=acquired_at,
        price=price,
        currency=currency,
        size_type=size_type,
        size_note=size_note,
        seller_name=seller_name,
        source_type=source_type,
        notes=notes,
        plant_number=plant_number,
        for_swap=for_swap,
        image=await read_upload(image),
    )
    logger.info(f"Admin {admin.user_id} adding instance to {slug}")
    return await handler.handle(command)
