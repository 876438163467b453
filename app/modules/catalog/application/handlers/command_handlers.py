# 📄 File: app/modules/catalog/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out the admin actions: adding a plant kind, adding an owned plant, uploading
# photos, and starring the headline photo.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating the repositories and the storage service for catalog
# writes. Provider failures propagate with their original message. Every result carries an
# explicit notice and redirect target for the client.
#
# 🔗 Dependencies:
# - app.modules.catalog.application.commands (command definitions)
# - app.modules.catalog.domain (slug rule, PhotoSequencer, repository interfaces)
# - app.shared.infrastructure.storage (Supabase Storage uploads)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.presentation.api.v1 (admin endpoints invoke handlers)

__all__ = [
    "CreatePlantTypeCommandHandler",
    "CreatePlantInstanceCommandHandler",
    "AddInstancePhotosCommandHandler",
    "SetFeaturedPhotoCommandHandler",
]

import logging

from fastapi import Depends

from app.modules.catalog.application.commands.add_instance_photos import AddInstancePhotosCommand
from app.modules.catalog.application.commands.create_plant_instance import CreatePlantInstanceCommand
from app.modules.catalog.application.commands.create_plant_type import CreatePlantTypeCommand
from app.modules.catalog.application.commands.set_featured_photo import SetFeaturedPhotoCommand
from app.modules.catalog.application.dto.catalog_dto import (
    CarouselDTO,
    InstanceCreatedDTO,
    PhotosAddedDTO,
    PlantTypeCreatedDTO,
    PlantTypeSummaryDTO,
)
from app.modules.catalog.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.catalog.domain.repositories.plant_photo_repository import PlantPhotoRepository
from app.modules.catalog.domain.repositories.plant_type_repository import PlantTypeRepository
from app.modules.catalog.domain.services.photo_sequencer import PhotoSequencer
from app.modules.catalog.infrastructure.database import (
    get_plant_instance_repository,
    get_plant_photo_repository,
    get_plant_type_repository,
)
from app.shared.core.exceptions import (
    DuplicateResourceError,
    ExternalServiceError,
    InstanceNotFoundError,
    NotFoundError,
    PhotoNotFoundError,
    PlantTypeNotFoundError,
    RepositoryError,
    ValidationError,
)
from app.shared.infrastructure.storage.supabase_storage import (
    SupabaseStorageService,
    get_storage_service,
)
from app.shared.utils.helpers import current_millis

logger = logging.getLogger(__name__)

NOTICE_PLANT_SAVED = "Plant saved"
NOTICE_INSTANCE_SAVED = "Instance saved"
NOTICE_PHOTOS_ADDED = "Photos added"
EMPTY_UPLOAD_MESSAGE = "Select at least one photo."


def plant_page(slug: str) -> str:
    return f"/plants/{slug}"


# ================================================================
# CreatePlantTypeCommandHandler
# ================================================================
class CreatePlantTypeCommandHandler:
    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
        storage: SupabaseStorageService = Depends(get_storage_service),
    ):
        self.plant_type_repository = plant_type_repository
        self.storage = storage

    async def handle(self, command: CreatePlantTypeCommand) -> PlantTypeCreatedDTO:
        """
        Create a plant type: compute the slug, upload the cover, insert the row.

        Raises:
            ValidationError: the name parts slugify to nothing
            DuplicateResourceError: the slug is already taken
            FileStorageError / RepositoryError: provider failures, message verbatim
        """
        slug = command.slug
        if not slug:
            raise ValidationError(
                message="Genus, cultivar or slug must contain letters or digits",
                field="slug",
                value=command.slug_override,
            )

        if await self.plant_type_repository.get_by_slug(slug) is not None:
            raise DuplicateResourceError(
                message=f'A plant with slug "{slug}" already exists',
                resource_type="plant_type",
                field="slug",
                value=slug,
            )

        cover_url = await self.storage.upload_image(
            self.storage.type_bucket,
            self.storage.type_cover_path(slug, command.cover_image),
            command.cover_image,
        )

        plant_type = await self.plant_type_repository.create({
            "genus": command.genus,
            "cultivar": command.cultivar,
            "variegation": command.variegation,
            "slug": slug,
            "cover_image_url": cover_url,
        })
        logger.info(f"Plant type created: {plant_type.slug} ({plant_type.id})")

        return PlantTypeCreatedDTO(
            plant=PlantTypeSummaryDTO.from_domain(plant_type),
            notice=NOTICE_PLANT_SAVED,
            redirect_to="/",
        )


# ================================================================
# CreatePlantInstanceCommandHandler
# ================================================================
class CreatePlantInstanceCommandHandler:
    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
        plant_instance_repository: PlantInstanceRepository = Depends(get_plant_instance_repository),
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
        storage: SupabaseStorageService = Depends(get_storage_service),
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_instance_repository = plant_instance_repository
        self.plant_photo_repository = plant_photo_repository
        self.storage = storage

    async def handle(self, command: CreatePlantInstanceCommand) -> InstanceCreatedDTO:
        """
        Insert the instance, then upload the optional cover and attach it as a photo.

        The image is validated before the insert so an unusable file leaves no row behind.

        Raises:
            PlantTypeNotFoundError: unknown type slug
            FileTooLargeError / InvalidFileTypeError: rejected image
            FileStorageError / RepositoryError: provider failures, message verbatim
        """
        plant_type = await self.plant_type_repository.get_by_slug(command.type_slug)
        if plant_type is None:
            raise PlantTypeNotFoundError(command.type_slug)

        if command.image is not None:
            self.storage.validate_image(command.image)

        instance = await self.plant_instance_repository.create(command.to_record(plant_type.id))
        logger.info(f"Plant instance created: {instance.id} under {plant_type.slug}")

        photo = None
        if command.image is not None:
            url = await self.storage.upload_image(
                self.storage.instance_bucket,
                self.storage.instance_cover_path(plant_type.slug, instance.id, command.image),
                command.image,
                validate=False,
            )
            photo = await self.plant_photo_repository.create({
                "instance_id": instance.id,
                "url": url,
            })

        return InstanceCreatedDTO(
            instance=instance,
            photo=photo,
            notice=NOTICE_INSTANCE_SAVED,
            redirect_to=plant_page(plant_type.slug),
        )


# ================================================================
# AddInstancePhotosCommandHandler
# ================================================================
class AddInstancePhotosCommandHandler:
    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
        plant_instance_repository: PlantInstanceRepository = Depends(get_plant_instance_repository),
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
        storage: SupabaseStorageService = Depends(get_storage_service),
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_instance_repository = plant_instance_repository
        self.plant_photo_repository = plant_photo_repository
        self.storage = storage

    async def handle(self, command: AddInstancePhotosCommand) -> PhotosAddedDTO:
        """
        Upload each file in order and insert a photo row after each upload.

        Processing stops at the first failure; photos already stored stay stored.

        Raises:
            ValidationError: no files
            InstanceNotFoundError: unknown instance
        """
        if not command.files:
            raise ValidationError(message=EMPTY_UPLOAD_MESSAGE, field="files")

        instance = await self.plant_instance_repository.get_by_id(command.instance_id)
        if instance is None:
            raise InstanceNotFoundError(command.instance_id)

        plant_type = await self.plant_type_repository.get_by_id(instance.type_id)
        if plant_type is None:
            raise NotFoundError(
                message=f"Plant type {instance.type_id} of instance {instance.id} was not found",
                resource_type="plant_type",
                resource_id=instance.type_id,
            )

        millis = current_millis()
        added = []
        for index, image in enumerate(command.files):
            url = await self.storage.upload_image(
                self.storage.instance_bucket,
                self.storage.instance_photo_path(plant_type.slug, instance.id, image, index, millis),
                image,
            )
            added.append(
                await self.plant_photo_repository.create({"instance_id": instance.id, "url": url})
            )

        logger.info(f"Added {len(added)} photo(s) to instance {instance.id}")
        return PhotosAddedDTO(
            photos=added,
            notice=NOTICE_PHOTOS_ADDED,
            redirect_to=plant_page(plant_type.slug),
        )


# ================================================================
# SetFeaturedPhotoCommandHandler
# ================================================================
class SetFeaturedPhotoCommandHandler:
    def __init__(
        self,
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
    ):
        self.plant_photo_repository = plant_photo_repository

    async def handle(self, command: SetFeaturedPhotoCommand) -> CarouselDTO:
        """
        Make one photo the instance's only featured photo.

        The id is checked against the loaded working set before any write. The remote
        write is a single atomic call; the local ordering changes only after it succeeds.

        Raises:
            PhotoNotFoundError: the photo is not one of the instance's photos
            ExternalServiceError: the backend rejected the write (safe to retry)
        """
        photos = await self.plant_photo_repository.list_by_instance(command.instance_id)
        sequencer = PhotoSequencer(photos, command.instance_id)

        if command.photo_id not in sequencer:
            raise PhotoNotFoundError(command.photo_id, command.instance_id)

        try:
            await self.plant_photo_repository.set_featured(command.instance_id, command.photo_id)
        except RepositoryError as e:
            logger.error(
                f"Featuring photo {command.photo_id} on {command.instance_id} failed: {e.message}"
            )
            raise ExternalServiceError(
                message=e.message,
                service="supabase",
                details=dict(e.details),
            ) from e

        sequencer.set_featured(command.photo_id)
        return CarouselDTO.from_sequencer(command.instance_id, sequencer)
