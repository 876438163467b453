# 📄 File: app/modules/catalog/application/queries/get_plant_type_detail.py
# 🧭 Purpose (Layman Explanation):
# The plant page question: "show me this kind of plant and every one I own".
# 🧪 Purpose (Technical Summary):
# CQRS query for one PlantType by slug with its instances and ordered photos.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# GetPlantTypeDetailQueryHandler, GET /plants/{slug}

from pydantic import BaseModel, Field


class GetPlantTypeDetailQuery(BaseModel):
    slug: str = Field(..., min_length=1, max_length=200)
