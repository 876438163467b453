# 📄 File: app/modules/catalog/application/dto/catalog_dto.py
# 🧭 Purpose (Layman Explanation):
# Ready-to-show versions of plants, plant cards, photo viewers and "saved!" confirmations.
#
# 🧪 Purpose (Technical Summary):
# Data Transfer Objects for catalog reads and writes. Domain entities are flattened with
# their computed display fields (display name, labels, hero image) so clients never
# re-derive presentation rules. Mutation results carry an explicit notice and redirect
# target instead of relying on any client-side toast store.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.catalog.domain (entities, PhotoSequencer)
#
# 🔄 Connected Modules / Calls From:
# - query_handlers.py / command_handlers.py (construction)
# - presentation routers (response_model)

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from app.modules.catalog.domain.models.plant_instance import PlantInstance
from app.modules.catalog.domain.models.plant_photo import PlantPhoto
from app.modules.catalog.domain.models.plant_type import PlantType
from app.modules.catalog.domain.services.photo_sequencer import PhotoSequencer


# =============================================================================
# READ MODELS
# =============================================================================

class PlantTypeSummaryDTO(BaseModel):
    """A plant type as shown on grid tiles and page headers."""

    id: str
    genus: str
    cultivar: str
    variegation: Optional[str] = None
    slug: str
    cover_image_url: Optional[str] = None
    display_name: str

    @classmethod
    def from_domain(cls, plant_type: PlantType) -> "PlantTypeSummaryDTO":
        return cls(
            id=plant_type.id,
            genus=plant_type.genus,
            cultivar=plant_type.cultivar,
            variegation=plant_type.variegation,
            slug=plant_type.slug,
            cover_image_url=plant_type.cover_image_url,
            display_name=plant_type.display_name,
        )


class PlantListDTO(BaseModel):
    plants: List[PlantTypeSummaryDTO]
    genera: List[str] = Field(..., description="'all' followed by the distinct genera")
    total: int
    query: str
    genus: str


class InstanceCardDTO(BaseModel):
    """One owned plant with its photos in display order."""

    id: str
    type_id: str
    type_slug: Optional[str] = None
    label: str
    acquired_at: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    price_label: Optional[str] = None
    meta_parts: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    plant_number: Optional[int] = None
    for_swap: bool = False
    created_at: Optional[str] = None
    hero_url: Optional[str] = None
    photo_count: int = 0
    photos: List[PlantPhoto] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        instance: PlantInstance,
        sequencer: PhotoSequencer,
        label: str,
        hero_url: Optional[str] = None,
        type_slug: Optional[str] = None,
    ) -> "InstanceCardDTO":
        return cls(
            id=instance.id,
            type_id=instance.type_id,
            type_slug=type_slug,
            label=label,
            acquired_at=instance.acquired_at,
            price=instance.price,
            currency=instance.currency,
            price_label=instance.price_label,
            meta_parts=instance.meta_parts,
            notes=instance.notes,
            plant_number=instance.plant_number,
            for_swap=instance.for_swap,
            created_at=instance.created_at,
            hero_url=hero_url if hero_url is not None else sequencer.hero_url,
            photo_count=len(sequencer),
            photos=sequencer.photos,
        )


class PlantDetailDTO(BaseModel):
    plant: PlantTypeSummaryDTO
    display_name: str
    instances: List[InstanceCardDTO]


class SwapListDTO(BaseModel):
    instances: List[InstanceCardDTO]
    total: int


class CarouselDTO(BaseModel):
    """Photo viewer state for one instance."""

    instance_id: str
    photos: List[PlantPhoto]
    cursor: int
    current: Optional[PlantPhoto] = None
    can_navigate: bool
    featured_photo_id: Optional[str] = None

    @classmethod
    def from_sequencer(cls, instance_id: str, sequencer: PhotoSequencer) -> "CarouselDTO":
        featured = sequencer.featured
        return cls(
            instance_id=instance_id,
            photos=sequencer.photos,
            cursor=sequencer.cursor,
            current=sequencer.current,
            can_navigate=sequencer.can_navigate,
            featured_photo_id=featured.id if featured else None,
        )


# =============================================================================
# WRITE RESULTS
# =============================================================================

class MutationResultDTO(BaseModel):
    """Outcome of an admin action: a one-shot notice and where to go next."""

    notice: str
    redirect_to: str


class PlantTypeCreatedDTO(MutationResultDTO):
    plant: PlantTypeSummaryDTO


class InstanceCreatedDTO(MutationResultDTO):
    instance: PlantInstance
    photo: Optional[PlantPhoto] = None


class PhotosAddedDTO(MutationResultDTO):
    photos: List[PlantPhoto]
