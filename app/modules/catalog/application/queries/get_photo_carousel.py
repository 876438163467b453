# 📄 File: app/modules/catalog/application/queries/get_photo_carousel.py
# 🧭 Purpose (Layman Explanation):
# The photo viewer question: "I'm on photo N of this plant, show me the next (or previous) one".
# 🧪 Purpose (Technical Summary):
# CQRS query positioning a PhotoSequencer at `index` and applying an optional move.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# GetPhotoCarouselQueryHandler, GET /instances/{id}/photos

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CarouselMove(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


class GetPhotoCarouselQuery(BaseModel):
    instance_id: str = Field(..., min_length=1)
    index: int = Field(default=0, description="Cursor to resume from; clamped into range")
    move: Optional[CarouselMove] = None
