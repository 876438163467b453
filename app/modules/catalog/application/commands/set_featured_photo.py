# 📄 File: app/modules/catalog/application/commands/set_featured_photo.py
# 🧭 Purpose (Layman Explanation):
# "Star this photo": make one photo the headline picture of a plant.
# 🧪 Purpose (Technical Summary):
# CQRS command for the single-featured-photo mutation of a PlantInstance.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# SetFeaturedPhotoCommandHandler, POST /instances/{id}/photos/{photo_id}/feature

from pydantic import BaseModel, Field


class SetFeaturedPhotoCommand(BaseModel):
    instance_id: str = Field(..., min_length=1)
    photo_id: str = Field(..., min_length=1)
