# 📄 File: app/modules/catalog/application/commands/create_plant_instance.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to record one more plant of a kind: when and where it was bought,
# what it cost, how big it is, notes, swap flag and an optional first photo.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for PlantInstance creation. Form-style input (empty strings) is normalized,
# size/source types are checked against the known options, and `to_record` builds the row.
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.modules.catalog.domain.models.plant_instance (option lists, defaults)
#
# 🔄 Connected Modules / Calls From:
# - CreatePlantInstanceCommandHandler
# - app.modules.catalog.presentation.api.v1.plants (POST /plants/{slug}/instances)

"""
Create Plant Instance Command

Update semantics follow the admin form:
- empty text fields are stored as NULL
- currency is stored only when a price is given
- size_type defaults to "baby", source_type to "shop", currency to "CZK"
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.catalog.domain.models.plant_instance import (
    DEFAULT_CURRENCY,
    DEFAULT_SIZE_TYPE,
    DEFAULT_SOURCE_TYPE,
    SIZE_TYPES,
    SOURCE_TYPES,
)
from app.shared.infrastructure.storage.supabase_storage import UploadedImage


class CreatePlantInstanceCommand(BaseModel):
    """Command for adding an owned plant under an existing plant type."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type_slug: str = Field(..., min_length=1)
    acquired_at: Optional[date] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    currency: str = Field(default=DEFAULT_CURRENCY, max_length=3)
    size_type: str = DEFAULT_SIZE_TYPE
    size_note: Optional[str] = Field(default=None, max_length=200)
    seller_name: Optional[str] = Field(default=None, max_length=200)
    source_type: str = DEFAULT_SOURCE_TYPE
    notes: Optional[str] = Field(default=None, max_length=2000)
    plant_number: Optional[int] = Field(default=None, ge=1)
    for_swap: bool = False
    image: Optional[UploadedImage] = None

    @field_validator(
        "acquired_at", "price", "size_note", "seller_name", "notes", "plant_number",
        mode="before",
    )
    @classmethod
    def blank_is_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CURRENCY
        return v.strip().upper()

    @field_validator("size_type")
    @classmethod
    def validate_size_type(cls, v: str) -> str:
        if v not in SIZE_TYPES:
            raise ValueError(f"size_type must be one of: {', '.join(SIZE_TYPES)}")
        return v

    @field_validator("source_type")
    @classmethod
    def validate_source_type(cls, v: str) -> str:
        if v not in SOURCE_TYPES:
            raise ValueError(f"source_type must be one of: {', '.join(SOURCE_TYPES)}")
        return v

    def to_record(self, type_id: str) -> Dict[str, Any]:
        """Row for `plant_instances`."""
        return {
            "type_id": type_id,
            "acquired_at": self.acquired_at.isoformat() if self.acquired_at else None,
            "price": float(self.price) if self.price is not None else None,
            "currency": self.currency if self.price is not None else None,
            "size_type": self.size_type,
            "size_note": self.size_note,
            "seller_name": self.seller_name,
            "source_type": self.source_type,
            "notes": self.notes,
            "plant_number": self.plant_number,
            "for_swap": self.for_swap,
        }
