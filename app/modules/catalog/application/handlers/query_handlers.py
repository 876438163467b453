# 📄 File: app/modules/catalog/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers the read-only questions: the searchable plant grid, one plant's page, the swap
# list, and flipping through a plant's photos.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers. Each loads what it needs through the repository interfaces, runs the
# pure domain services (catalog filter, photo sequencer) and returns DTOs.
#
# 🔗 Dependencies:
# - app.modules.catalog.domain (filter, sequencer, repositories)
# - app.modules.catalog.infrastructure.database (repository providers)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.presentation.api.v1.plants / instances / swap

__all__ = [
    "ListPlantTypesQueryHandler",
    "GetPlantTypeDetailQueryHandler",
    "ListSwapInstancesQueryHandler",
    "GetPhotoCarouselQueryHandler",
]

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from fastapi import Depends

from app.modules.catalog.application.dto.catalog_dto import (
    CarouselDTO,
    InstanceCardDTO,
    PlantDetailDTO,
    PlantListDTO,
    PlantTypeSummaryDTO,
    SwapListDTO,
)
from app.modules.catalog.application.queries.get_photo_carousel import (
    CarouselMove,
    GetPhotoCarouselQuery,
)
from app.modules.catalog.application.queries.get_plant_type_detail import GetPlantTypeDetailQuery
from app.modules.catalog.application.queries.list_plant_types import ListPlantTypesQuery
from app.modules.catalog.application.queries.list_swap_instances import ListSwapInstancesQuery
from app.modules.catalog.domain.models.plant_photo import PlantPhoto
from app.modules.catalog.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.catalog.domain.repositories.plant_photo_repository import PlantPhotoRepository
from app.modules.catalog.domain.repositories.plant_type_repository import PlantTypeRepository
from app.modules.catalog.domain.services.catalog_filter import filter_plants, genus_facets
from app.modules.catalog.domain.services.photo_sequencer import PhotoSequencer
from app.modules.catalog.infrastructure.database import (
    get_plant_instance_repository,
    get_plant_photo_repository,
    get_plant_type_repository,
)
from app.shared.core.exceptions import InstanceNotFoundError, PlantTypeNotFoundError

logger = logging.getLogger(__name__)


def group_photos(photos: Iterable[PlantPhoto]) -> Dict[str, List[PlantPhoto]]:
    """Bucket photos by instance id, keeping fetch order within each bucket."""
    grouped: Dict[str, List[PlantPhoto]] = defaultdict(list)
    for photo in photos:
        grouped[photo.instance_id].append(photo)
    return grouped


class ListPlantTypesQueryHandler:
    """Home grid: every type, the genus facets, and the filtered subset."""

    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
    ):
        self.plant_type_repository = plant_type_repository

    async def handle(self, query: ListPlantTypesQuery) -> PlantListDTO:
        plants = await self.plant_type_repository.list_all()
        visible = filter_plants(plants, query=query.query, genus=query.genus)
        logger.debug(
            f"Catalog filter q={query.query!r} genus={query.genus!r}: {len(visible)}/{len(plants)}"
        )
        return PlantListDTO(
            plants=[PlantTypeSummaryDTO.from_domain(plant) for plant in visible],
            genera=genus_facets(plants),
            total=len(visible),
            query=query.query,
            genus=query.genus,
        )


class GetPlantTypeDetailQueryHandler:
    """Plant page: one type with its instances, newest first, and their ordered photos."""

    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
        plant_instance_repository: PlantInstanceRepository = Depends(get_plant_instance_repository),
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_instance_repository = plant_instance_repository
        self.plant_photo_repository = plant_photo_repository

    async def handle(self, query: GetPlantTypeDetailQuery) -> PlantDetailDTO:
        plant_type = await self.plant_type_repository.get_by_slug(query.slug)
        if plant_type is None:
            raise PlantTypeNotFoundError(query.slug)

        instances = await self.plant_instance_repository.list_by_type(plant_type.id)
        photos = await self.plant_photo_repository.list_by_instances(
            [instance.id for instance in instances]
        )
        photos_by_instance = group_photos(photos)

        cards = []
        for instance in instances:
            sequencer = PhotoSequencer(photos_by_instance.get(instance.id, []), instance.id)
            cards.append(
                InstanceCardDTO.build(
                    instance,
                    sequencer,
                    label=instance.detail_label,
                    type_slug=plant_type.slug,
                )
            )

        return PlantDetailDTO(
            plant=PlantTypeSummaryDTO.from_domain(plant_type),
            display_name=plant_type.display_name,
            instances=cards,
        )


class ListSwapInstancesQueryHandler:
    """
    Swap list: instances flagged for swap with their types looked up in one batch.

    The card image is the type cover when there is one, else the first ordered photo.
    """

    def __init__(
        self,
        plant_type_repository: PlantTypeRepository = Depends(get_plant_type_repository),
        plant_instance_repository: PlantInstanceRepository = Depends(get_plant_instance_repository),
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
    ):
        self.plant_type_repository = plant_type_repository
        self.plant_instance_repository = plant_instance_repository
        self.plant_photo_repository = plant_photo_repository

    async def handle(self, query: ListSwapInstancesQuery) -> SwapListDTO:
        instances = await self.plant_instance_repository.list_for_swap()
        if not instances:
            return SwapListDTO(instances=[], total=0)

        type_ids = list(dict.fromkeys(instance.type_id for instance in instances))
        types_by_id = {
            plant_type.id: plant_type
            for plant_type in await self.plant_type_repository.get_by_ids(type_ids)
        }
        photos_by_instance = group_photos(
            await self.plant_photo_repository.list_by_instances(
                [instance.id for instance in instances]
            )
        )

        cards = []
        for instance in instances:
            plant_type = types_by_id.get(instance.type_id)
            sequencer = PhotoSequencer(photos_by_instance.get(instance.id, []), instance.id)
            hero_url = (plant_type.cover_image_url if plant_type else None) or sequencer.hero_url
            cards.append(
                InstanceCardDTO.build(
                    instance,
                    sequencer,
                    label=instance.swap_label(plant_type),
                    hero_url=hero_url,
                    type_slug=plant_type.slug if plant_type else None,
                )
            )

        return SwapListDTO(instances=cards, total=len(cards))


class GetPhotoCarouselQueryHandler:
    """Photo viewer: resume at a cursor position and optionally step once."""

    def __init__(
        self,
        plant_instance_repository: PlantInstanceRepository = Depends(get_plant_instance_repository),
        plant_photo_repository: PlantPhotoRepository = Depends(get_plant_photo_repository),
    ):
        self.plant_instance_repository = plant_instance_repository
        self.plant_photo_repository = plant_photo_repository

    async def handle(self, query: GetPhotoCarouselQuery) -> CarouselDTO:
        instance = await self.plant_instance_repository.get_by_id(query.instance_id)
        if instance is None:
            raise InstanceNotFoundError(query.instance_id)

        photos = await self.plant_photo_repository.list_by_instance(instance.id)
        sequencer = PhotoSequencer(photos, instance.id)
        sequencer.move_to(query.index)

        if query.move == CarouselMove.NEXT:
            sequencer.next()
        elif query.move == CarouselMove.PREVIOUS:
            sequencer.previous()

        return CarouselDTO.from_sequencer(instance.id, sequencer)
