# 📄 File: app/modules/catalog/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# The admin actions that change the collection.
# 🧪 Purpose (Technical Summary):
# Write-side command definitions.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command_handlers.py, presentation routers

from .create_plant_type import CreatePlantTypeCommand
from .create_plant_instance import CreatePlantInstanceCommand
from .add_instance_photos import AddInstancePhotosCommand
from .set_featured_photo import SetFeaturedPhotoCommand

__all__ = [
    "CreatePlantTypeCommand",
    "CreatePlantInstanceCommand",
    "AddInstancePhotosCommand",
    "SetFeaturedPhotoCommand",
]
