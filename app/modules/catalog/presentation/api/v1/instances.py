# 📄 File: app/modules/catalog/presentation/api/v1/instances.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for one plant's photos: flipping through them, uploading more, and
# starring the headline photo.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for the photo carousel (public) and the admin photo writes (multi-file
# upload, atomic featured-photo switch).
#
# 🔗 Dependencies:
# - FastAPI router, File (python-multipart)
# - app.modules.catalog.application.handlers
# - app.modules.auth.presentation.dependencies (get_current_admin_user)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/instances)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from app.modules.auth.presentation.dependencies import CurrentUser, get_current_admin_user
from app.modules.catalog.application.commands.add_instance_photos import AddInstancePhotosCommand
from app.modules.catalog.application.commands.set_featured_photo import SetFeaturedPhotoCommand
from app.modules.catalog.application.dto.catalog_dto import CarouselDTO, PhotosAddedDTO
from app.modules.catalog.application.handlers.command_handlers import (
    AddInstancePhotosCommandHandler,
    SetFeaturedPhotoCommandHandler,
)
from app.modules.catalog.application.handlers.query_handlers import GetPhotoCarouselQueryHandler
from app.modules.catalog.application.queries.get_photo_carousel import (
    CarouselMove,
    GetPhotoCarouselQuery,
)
from app.modules.catalog.presentation.dependencies import read_uploads

logger = logging.getLogger(__name__)

instances_router = APIRouter()


@instances_router.get(
    "/{instance_id}/photos",
    response_model=CarouselDTO,
    summary="Photo carousel",
    description="Ordered photos of an instance with the cursor resumed at `index` and moved once",
    responses={404: {"description": "Unknown instance"}},
)
async def get_photos(
    instance_id: str,
    index: int = Query(default=0, description="Cursor to resume from"),
    move: Optional[CarouselMove] = Query(default=None),
    handler: GetPhotoCarouselQueryHandler = Depends(),
) -> CarouselDTO:
    return await handler.handle(
        GetPhotoCarouselQuery(instance_id=instance_id, index=index, move=move)
    )


@instances_router.post(
    "/{instance_id}/photos",
    response_model=PhotosAddedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add photos",
    description="Upload one or more photos to an instance, in order (admin only)",
    responses={
        401: {"description": "Login required"},
        403: {"description": "Admin privileges required"},
        404: {"description": "Unknown instance"},
        422: {"description": "No photos selected"},
        502: {"description": "Upload or insert failed; message passed through"},
    },
)
async def add_photos(
    instance_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    files: Optional[List[UploadFile]] = File(None),
    handler: AddInstancePhotosCommandHandler = Depends(),
) -> PhotosAddedDTO:
    command = AddInstancePhotosCommand(instance_id=instance_id, files=await read_uploads(files))
    logger.info(f"Admin {admin.user_id} uploading {len(command.files)} photo(s) to {instance_id}")
    return await handler.handle(command)


@instances_router.post(
    "/{instance_id}/photos/{photo_id}/feature",
    response_model=CarouselDTO,
    summary="Feature photo",
    description="Make one photo the instance's only featured photo (admin only)",
    responses={
        401: {"description": "Login required"},
        403: {"description": "Admin privileges required"},
        404: {"description": "Photo is not part of the instance"},
        502: {"description": "Supabase rejected the write; safe to retry"},
    },
)
async def feature_photo(
    instance_id: str,
    photo_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    handler: SetFeaturedPhotoCommandHandler = Depends(),
) -> CarouselDTO:
    return await handler.handle(SetFeaturedPhotoCommand(instance_id=instance_id, photo_id=photo_id))
