# 📄 File: app/modules/catalog/domain/models/plant_type.py
# 🧭 Purpose (Layman Explanation):
# Describes one kind of plant in the collection, like "Alocasia Dragon Scale", with its
# web address name (slug) and cover photo.
# 🧪 Purpose (Technical Summary):
# Domain model for the PlantType entity (row of `plant_types`), including display name
# composition, the searchable text used by the catalog filter, and the slug rule.
# 🔗 Dependencies:
# pydantic, typing, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# catalog_filter.py, plant_type_repository.py, command/query handlers, plant schemas

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.shared.utils.helpers import generate_slug


def build_type_slug(
    genus: str,
    cultivar: str,
    variegation: Optional[str] = None,
    slug_override: Optional[str] = None,
) -> str:
    """
    Compute the slug for a new plant type.

    A non-blank override wins (and is slugified itself); otherwise the slug is
    derived from the non-empty name parts joined by spaces.
    """
    if slug_override and slug_override.strip():
        return generate_slug(slug_override)
    display = " ".join(part for part in (genus, cultivar, variegation) if part)
    return generate_slug(display)


class PlantType(BaseModel):
    """
    A taxon/cultivar identity: the catalog-level entry.

    `slug` is unique across all types and used as the stable navigation key.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    genus: str
    cultivar: str
    variegation: Optional[str] = None
    slug: str
    cover_image_url: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v)

    @property
    def display_name(self) -> str:
        """Genus and cultivar, followed by the variegation when there is one."""
        name = f"{self.genus} {self.cultivar}"
        if self.variegation:
            name = f"{name} {self.variegation}"
        return name

    @property
    def search_text(self) -> str:
        """Lower-cased haystack for free-text search."""
        return f"{self.genus} {self.cultivar} {self.variegation or ''} {self.slug}".lower()

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "PlantType":
        return cls(
            id=record["id"],
            genus=record.get("genus") or "",
            cultivar=record.get("cultivar") or "",
            variegation=record.get("variegation"),
            slug=record["slug"],
            cover_image_url=record.get("cover_image_url"),
        )


def display_name_for(plant_type: Optional[PlantType]) -> str:
    """Display name that tolerates a dangling type reference."""
    if plant_type is None:
        return "Unknown plant"
    return plant_type.display_name
