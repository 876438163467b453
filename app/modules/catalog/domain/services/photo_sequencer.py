# 📄 File: app/modules/catalog/domain/services/photo_sequencer.py
# 🧭 Purpose (Layman Explanation):
# Decides the order photos of one plant are shown in (starred photo first, then newest),
# and remembers which photo the viewer is looking at while flipping left and right.
# 🧪 Purpose (Technical Summary):
# In-memory working set for one instance's photos: stable featured-first / date-descending
# ordering, a cyclic navigation cursor, and the single-featured mutation.
# 🔗 Dependencies:
# typing, app.modules.catalog.domain.models.plant_photo, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Catalog query handlers (detail, swap, carousel), SetFeaturedPhotoCommandHandler

from typing import Iterable, List, Optional

from app.shared.core.exceptions import PhotoNotFoundError
from ..models.plant_photo import PlantPhoto


def sort_photos(photos: Iterable[PlantPhoto]) -> List[PlantPhoto]:
    """
    Featured photos first, then most recent first.

    Two stable passes: the secondary key first, then the primary key, so
    equal photos keep their input order.
    """
    ordered = sorted(photos, key=lambda photo: photo.effective_date, reverse=True)
    return sorted(ordered, key=lambda photo: not photo.is_featured)


class PhotoSequencer:
    """
    Display order and carousel cursor for the photos of one plant instance.

    The cursor is an index into the sorted sequence; with no photos there is
    nothing to navigate and `current` is None.
    """

    def __init__(self, photos: Iterable[PlantPhoto], instance_id: Optional[str] = None):
        self.instance_id = instance_id
        self._photos = sort_photos(photos)
        self._cursor = 0

    @property
    def photos(self) -> List[PlantPhoto]:
        return list(self._photos)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_navigate(self) -> bool:
        return bool(self._photos)

    @property
    def current(self) -> Optional[PlantPhoto]:
        if not self._photos:
            return None
        return self._photos[self._cursor]

    @property
    def featured(self) -> Optional[PlantPhoto]:
        for photo in self._photos:
            if photo.is_featured:
                return photo
        return None

    @property
    def hero_url(self) -> Optional[str]:
        return self._photos[0].url if self._photos else None

    def __len__(self) -> int:
        return len(self._photos)

    def __contains__(self, photo_id: str) -> bool:
        return any(photo.id == photo_id for photo in self._photos)

    def open(self) -> None:
        self._cursor = 0

    def next(self) -> int:
        if self._photos:
            self._cursor = (self._cursor + 1) % len(self._photos)
        return self._cursor

    def previous(self) -> int:
        if self._photos:
            self._cursor = (self._cursor - 1 + len(self._photos)) % len(self._photos)
        return self._cursor

    def move_to(self, index: int) -> int:
        """Place the cursor at `index`, clamped into the valid range."""
        if self._photos:
            self._cursor = min(max(index, 0), len(self._photos) - 1)
        return self._cursor

    def set_featured(self, photo_id: str) -> PlantPhoto:
        """
        Make `photo_id` the only featured photo, re-sort, and rewind the cursor.

        Raises:
            PhotoNotFoundError: the id is not in this working set; nothing changes
        """
        if photo_id not in self:
            raise PhotoNotFoundError(photo_id, self.instance_id)

        self._photos = sort_photos(
            photo.with_featured(photo.id == photo_id) for photo in self._photos
        )
        self._cursor = 0
        return self._photos[0]
