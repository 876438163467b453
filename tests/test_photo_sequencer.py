"""
Tests for photo ordering and the carousel cursor.
"""

import pytest

from app.modules.catalog.domain.models.plant_photo import PlantPhoto
from app.modules.catalog.domain.services.photo_sequencer import PhotoSequencer, sort_photos
from app.shared.core.exceptions import PhotoNotFoundError


def photo(photo_id, taken_at=None, created_at=None, featured=False) -> PlantPhoto:
    return PlantPhoto(
        id=photo_id,
        instance_id="inst-1",
        url=f"https://cdn.test/{photo_id}.jpg",
        taken_at=taken_at,
        created_at=created_at,
        is_featured=featured,
    )


@pytest.fixture
def sequencer() -> PhotoSequencer:
    return PhotoSequencer(
        [
            photo("a", taken_at="2024-01-01"),
            photo("b", taken_at="2024-03-01"),
            photo("c", created_at="2024-02-01T09:00:00+00:00"),
        ],
        instance_id="inst-1",
    )


class TestSortPhotos:
    def test_most_recent_first(self):
        ordered = sort_photos([photo("old", taken_at="2023-05-01"), photo("new", taken_at="2024-05-01")])
        assert [p.id for p in ordered] == ["new", "old"]

    def test_featured_comes_first(self):
        ordered = sort_photos([
            photo("new", taken_at="2024-05-01"),
            photo("star", taken_at="2020-01-01", featured=True),
        ])
        assert [p.id for p in ordered] == ["star", "new"]

    def test_taken_at_wins_over_created_at(self):
        ordered = sort_photos([
            photo("scanned", taken_at="2020-01-01", created_at="2024-12-01T00:00:00+00:00"),
            photo("fresh", created_at="2024-06-01T00:00:00+00:00"),
        ])
        assert [p.id for p in ordered] == ["fresh", "scanned"]

    def test_undated_photos_sort_last_and_keep_input_order(self):
        ordered = sort_photos([photo("x"), photo("dated", taken_at="2024-01-01"), photo("y")])
        assert [p.id for p in ordered] == ["dated", "x", "y"]

    def test_equal_dates_keep_input_order(self):
        ordered = sort_photos([photo("first", taken_at="2024-01-01"), photo("second", taken_at="2024-01-01")])
        assert [p.id for p in ordered] == ["first", "second"]


class TestPhotoSequencer:
    def test_display_order(self, sequencer):
        assert [p.id for p in sequencer.photos] == ["b", "c", "a"]
        assert sequencer.hero_url == "https://cdn.test/b.jpg"
        assert len(sequencer) == 3

    def test_empty_sequence(self):
        empty = PhotoSequencer([])
        assert empty.current is None
        assert empty.can_navigate is False
        assert empty.hero_url is None
        assert empty.next() == 0
        assert empty.previous() == 0
        assert empty.move_to(4) == 0

    def test_next_wraps_around(self, sequencer):
        assert [sequencer.next() for _ in range(3)] == [1, 2, 0]

    def test_previous_wraps_around(self, sequencer):
        assert sequencer.previous() == 2
        assert sequencer.current.id == "a"

    def test_single_photo_stays_put(self):
        single = PhotoSequencer([photo("only")])
        assert single.next() == 0
        assert single.previous() == 0
        assert single.can_navigate is True

    def test_open_rewinds(self, sequencer):
        sequencer.next()
        sequencer.open()
        assert sequencer.cursor == 0

    def test_move_to_clamps(self, sequencer):
        assert sequencer.move_to(1) == 1
        assert sequencer.move_to(10) == 2
        assert sequencer.move_to(-3) == 0

    def test_set_featured_is_exclusive_and_resorts(self, sequencer):
        sequencer.next()
        featured = sequencer.set_featured("a")

        assert featured.id == "a"
        assert [p.id for p in sequencer.photos] == ["a", "b", "c"]
        assert [p.id for p in sequencer.photos if p.is_featured] == ["a"]
        assert sequencer.cursor == 0

    def test_set_featured_replaces_previous_featured(self):
        seq = PhotoSequencer([photo("old-star", featured=True, taken_at="2024-01-01"), photo("new", taken_at="2024-02-01")])
        seq.set_featured("new")
        assert seq.featured.id == "new"
        assert [p.id for p in seq.photos] == ["new", "old-star"]

    def test_set_featured_unknown_id_changes_nothing(self, sequencer):
        sequencer.next()
        before = sequencer.photos

        with pytest.raises(PhotoNotFoundError):
            sequencer.set_featured("not-here")

        assert sequencer.photos == before
        assert sequencer.cursor == 1
        assert sequencer.featured is None

    def test_contains(self, sequencer):
        assert "b" in sequencer
        assert "z" not in sequencer
