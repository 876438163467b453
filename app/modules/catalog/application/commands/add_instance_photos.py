# 📄 File: app/modules/catalog/application/commands/add_instance_photos.py
# 🧭 Purpose (Layman Explanation):
# A batch of new photos for one plant.
# 🧪 Purpose (Technical Summary):
# CQRS command for appending photos to a PlantInstance; files are uploaded in list order.
# 🔗 Dependencies:
# pydantic, app.shared.infrastructure.storage (UploadedImage)
# 🔄 Connected Modules / Calls From:
# AddInstancePhotosCommandHandler, POST /instances/{id}/photos

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.shared.infrastructure.storage.supabase_storage import UploadedImage


class AddInstancePhotosCommand(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    instance_id: str
    files: List[UploadedImage] = Field(default_factory=list)
