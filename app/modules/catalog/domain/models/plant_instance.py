# 📄 File: app/modules/catalog/domain/models/plant_instance.py
# 🧭 Purpose (Layman Explanation):
# Describes one real plant on the shelf: when and where it was bought, for how much,
# how big it is, and whether it's up for swapping.
# 🧪 Purpose (Technical Summary):
# Domain model for the PlantInstance entity (row of `plant_instances`) with the display
# helpers shared by the detail and swap views: price label, meta line, card labels.
# 🔗 Dependencies:
# pydantic, typing, decimal, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# plant_instance_repository.py, query handlers, create instance command, schemas

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.shared.utils.helpers import format_number
from .plant_type import PlantType, display_name_for

SIZE_TYPES = ("corm", "baby", "juvenile", "mature", "cutting", "tc", "rescue")
SOURCE_TYPES = ("shop", "privateSeller", "exchange", "gift", "import")

DEFAULT_SIZE_TYPE = "baby"
DEFAULT_SOURCE_TYPE = "shop"
DEFAULT_CURRENCY = "CZK"


class PlantInstance(BaseModel):
    """
    One physically owned specimen of a PlantType.

    `price` and `currency` only mean something together; a lone value is
    treated as "no price" for display.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type_id: str
    acquired_at: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    size_type: Optional[str] = None
    size_note: Optional[str] = None
    seller_name: Optional[str] = None
    source_type: Optional[str] = None
    notes: Optional[str] = None
    plant_number: Optional[int] = None
    for_swap: bool = False
    created_at: Optional[str] = None

    @field_validator("id", "type_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v)

    @field_validator("for_swap", mode="before")
    @classmethod
    def null_is_false(cls, v):
        return bool(v)

    @property
    def price_label(self) -> Optional[str]:
        if not self.price or not self.currency:
            return None
        return f"{format_number(self.price)} {self.currency}"

    @property
    def meta_parts(self) -> List[str]:
        parts = [self.size_type, self.size_note, self.source_type, self.seller_name]
        return [part for part in parts if part]

    @property
    def detail_label(self) -> str:
        """Card title on a plant type page."""
        return f"Plant {self.id[:6]}"

    def swap_label(self, plant_type: Optional[PlantType]) -> str:
        """Card title on the swap page: type name plus plant number when known."""
        name = display_name_for(plant_type)
        if self.plant_number:
            return f"{name} #{self.plant_number}"
        return name

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "PlantInstance":
        return cls(**{key: record.get(key) for key in cls.model_fields if key in record})
