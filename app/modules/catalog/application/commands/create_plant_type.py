# 📄 File: app/modules/catalog/application/commands/create_plant_type.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to add a new kind of plant: its name parts, an optional custom web
# address, and the cover picture.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for PlantType creation. Blank optional fields are normalized to None so
# the slug rule and the inserted row agree.
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.shared.infrastructure.storage (UploadedImage)
# - app.modules.catalog.domain.models.plant_type (slug rule)
#
# 🔄 Connected Modules / Calls From:
# - CreatePlantTypeCommandHandler
# - app.modules.catalog.presentation.api.v1.plants (POST /plants)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.catalog.domain.models.plant_type import build_type_slug
from app.shared.infrastructure.storage.supabase_storage import UploadedImage


class CreatePlantTypeCommand(BaseModel):
    """Command for adding a plant type with its cover image."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    genus: str = Field(..., min_length=1, max_length=100, description="Genus, e.g. Alocasia")
    cultivar: str = Field(..., min_length=1, max_length=150, description="Cultivar or species name")
    variegation: Optional[str] = Field(default=None, max_length=100)
    slug_override: Optional[str] = Field(default=None, max_length=200)
    cover_image: UploadedImage

    @field_validator("genus", "cultivar", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("variegation", "slug_override", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def slug(self) -> str:
        return build_type_slug(self.genus, self.cultivar, self.variegation, self.slug_override)
