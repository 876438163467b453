# 📄 File: app/modules/catalog/domain/models/plant_photo.py
# 🧭 Purpose (Layman Explanation):
# Describes one picture of a plant, and whether it's the "starred" photo shown first.
# 🧪 Purpose (Technical Summary):
# Domain model for the PlantPhoto entity (row of `plant_photos`). Dates are kept as the
# ISO strings the backend returns so they compare ordinally.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# photo_sequencer.py, plant_photo_repository.py, handlers, schemas

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PlantPhoto(BaseModel):
    """One image attached to a plant instance."""

    model_config = ConfigDict(frozen=True)

    id: str
    instance_id: str
    url: str
    caption: Optional[str] = None
    taken_at: Optional[str] = None
    created_at: Optional[str] = None
    is_featured: bool = False

    @field_validator("id", "instance_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v)

    @field_validator("is_featured", mode="before")
    @classmethod
    def null_is_false(cls, v):
        return bool(v)

    @property
    def effective_date(self) -> str:
        """taken_at, else created_at, else "" (sorts before any real date)."""
        return self.taken_at or self.created_at or ""

    def with_featured(self, featured: bool) -> "PlantPhoto":
        return self.model_copy(update={"is_featured": featured})

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "PlantPhoto":
        return cls(**{key: record.get(key) for key in cls.model_fields if key in record})
