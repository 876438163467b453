# 📄 File: app/modules/catalog/application/queries/list_plant_types.py
# 🧭 Purpose (Layman Explanation):
# The home page question: "show me the plants, optionally searched and narrowed to a genus".
# 🧪 Purpose (Technical Summary):
# CQRS query for the filtered PlantType grid plus genus facets.
# 🔗 Dependencies:
# pydantic, app.modules.catalog.domain.services.catalog_filter (ALL_GENERA)
# 🔄 Connected Modules / Calls From:
# ListPlantTypesQueryHandler, GET /plants

from pydantic import BaseModel, Field, field_validator

from app.modules.catalog.domain.services.catalog_filter import ALL_GENERA


class ListPlantTypesQuery(BaseModel):
    query: str = Field(default="", max_length=200, description="Free-text search")
    genus: str = Field(default=ALL_GENERA, description="Exact genus, or 'all'")

    @field_validator("query", mode="before")
    @classmethod
    def none_is_empty(cls, v):
        return "" if v is None else v

    @field_validator("genus", mode="before")
    @classmethod
    def default_genus(cls, v):
        return v or ALL_GENERA
