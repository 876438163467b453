"""
Tests for the catalog command and query handlers against in-memory repositories.
"""

from decimal import Decimal

import pytest

from app.modules.catalog.application.commands.add_instance_photos import AddInstancePhotosCommand
from app.modules.catalog.application.commands.create_plant_instance import CreatePlantInstanceCommand
from app.modules.catalog.application.commands.create_plant_type import CreatePlantTypeCommand
from app.modules.catalog.application.commands.set_featured_photo import SetFeaturedPhotoCommand
from app.modules.catalog.application.handlers.command_handlers import (
    AddInstancePhotosCommandHandler,
    CreatePlantInstanceCommandHandler,
    CreatePlantTypeCommandHandler,
    SetFeaturedPhotoCommandHandler,
)
from app.modules.catalog.application.handlers.query_handlers import (
    GetPhotoCarouselQueryHandler,
    GetPlantTypeDetailQueryHandler,
    ListPlantTypesQueryHandler,
    ListSwapInstancesQueryHandler,
)
from app.modules.catalog.application.queries.get_photo_carousel import (
    CarouselMove,
    GetPhotoCarouselQuery,
)
from app.modules.catalog.application.queries.get_plant_type_detail import GetPlantTypeDetailQuery
from app.modules.catalog.application.queries.list_plant_types import ListPlantTypesQuery
from app.modules.catalog.application.queries.list_swap_instances import ListSwapInstancesQuery
from app.shared.core.exceptions import (
    DuplicateResourceError,
    ExternalServiceError,
    FileStorageError,
    InstanceNotFoundError,
    InvalidFileTypeError,
    PhotoNotFoundError,
    PlantTypeNotFoundError,
    ValidationError,
)
from app.shared.infrastructure.storage.supabase_storage import UploadedImage

from conftest import (
    ALOCASIA_ID,
    INSTANCE_MONSTERA,
    INSTANCE_NEW,
    INSTANCE_OLD,
    INSTANCE_ORPHAN,
    make_image,
)


# =============================================================================
# QUERIES
# =============================================================================

class TestListPlantTypes:
    async def test_lists_sorted_with_facets(self, plant_types):
        result = await ListPlantTypesQueryHandler(plant_types).handle(ListPlantTypesQuery())

        assert [p.genus for p in result.plants] == ["Alocasia", "Monstera", "Philodendron"]
        assert result.genera == ["all", "Alocasia", "Monstera", "Philodendron"]
        assert result.total == 3

    async def test_filters_but_keeps_all_facets(self, plant_types):
        result = await ListPlantTypesQueryHandler(plant_types).handle(
            ListPlantTypesQuery(query="thai", genus="Monstera")
        )

        assert [p.slug for p in result.plants] == ["monstera-deliciosa-thai-constellation"]
        assert result.plants[0].display_name == "Monstera Deliciosa Thai Constellation"
        assert len(result.genera) == 4

    def test_blank_inputs_fall_back_to_defaults(self):
        query = ListPlantTypesQuery(query=None, genus="")
        assert query.query == ""
        assert query.genus == "all"


class TestPlantTypeDetail:
    async def test_instances_newest_first_with_ordered_photos(
        self, plant_types, plant_instances, plant_photos
    ):
        handler = GetPlantTypeDetailQueryHandler(plant_types, plant_instances, plant_photos)
        result = await handler.handle(GetPlantTypeDetailQuery(slug="alocasia-dragon-scale"))

        assert result.display_name == "Alocasia Dragon Scale"
        assert [card.id for card in result.instances] == [INSTANCE_NEW, INSTANCE_OLD]

        old = result.instances[1]
        assert old.label == "Plant inst-a"
        assert old.price_label == "1200 CZK"
        assert old.meta_parts == ["mature", "shop", "Green Corner"]
        assert [p.id for p in old.photos] == ["photo-feb", "photo-mar", "photo-jan"]
        assert old.hero_url == "https://cdn.test/feb.jpg"

        new = result.instances[0]
        assert new.photos == []
        assert new.hero_url is None
        assert new.price_label is None

    async def test_unknown_slug(self, plant_types, plant_instances, plant_photos):
        handler = GetPlantTypeDetailQueryHandler(plant_types, plant_instances, plant_photos)
        with pytest.raises(PlantTypeNotFoundError):
            await handler.handle(GetPlantTypeDetailQuery(slug="no-such-plant"))


class TestSwapList:
    async def test_swap_cards(self, plant_types, plant_instances, plant_photos):
        handler = ListSwapInstancesQueryHandler(plant_types, plant_instances, plant_photos)
        result = await handler.handle(ListSwapInstancesQuery())

        assert [card.id for card in result.instances] == [
            INSTANCE_ORPHAN,
            INSTANCE_NEW,
            INSTANCE_MONSTERA,
        ]
        labels = {card.id: card.label for card in result.instances}
        assert labels[INSTANCE_ORPHAN] == "Unknown plant #7"
        assert labels[INSTANCE_NEW] == "Alocasia Dragon Scale #2"
        assert labels[INSTANCE_MONSTERA] == "Monstera Deliciosa Thai Constellation"

    async def test_card_image_prefers_type_cover(self, plant_types, plant_instances, plant_photos):
        handler = ListSwapInstancesQueryHandler(plant_types, plant_instances, plant_photos)
        cards = {card.id: card for card in (await handler.handle(ListSwapInstancesQuery())).instances}

        assert cards[INSTANCE_NEW].hero_url.endswith("alocasia-dragon-scale/cover.jpg")
        assert cards[INSTANCE_MONSTERA].hero_url == "https://cdn.test/monstera.jpg"
        assert cards[INSTANCE_ORPHAN].hero_url is None
        assert cards[INSTANCE_ORPHAN].type_slug is None

    async def test_empty_swap_list(self, plant_types, plant_photos):
        from conftest import InMemoryPlantInstanceRepository

        handler = ListSwapInstancesQueryHandler(
            plant_types, InMemoryPlantInstanceRepository(), plant_photos
        )
        result = await handler.handle(ListSwapInstancesQuery())
        assert result.total == 0


class TestPhotoCarousel:
    async def test_resume_and_step(self, plant_instances, plant_photos):
        handler = GetPhotoCarouselQueryHandler(plant_instances, plant_photos)
        result = await handler.handle(
            GetPhotoCarouselQuery(instance_id=INSTANCE_OLD, index=2, move=CarouselMove.NEXT)
        )

        assert result.cursor == 0
        assert result.current.id == "photo-feb"
        assert result.featured_photo_id == "photo-feb"

    async def test_previous_from_start_wraps(self, plant_instances, plant_photos):
        handler = GetPhotoCarouselQueryHandler(plant_instances, plant_photos)
        result = await handler.handle(
            GetPhotoCarouselQuery(instance_id=INSTANCE_OLD, move=CarouselMove.PREVIOUS)
        )
        assert result.cursor == 2
        assert result.current.id == "photo-jan"

    async def test_instance_without_photos(self, plant_instances, plant_photos):
        handler = GetPhotoCarouselQueryHandler(plant_instances, plant_photos)
        result = await handler.handle(
            GetPhotoCarouselQuery(instance_id=INSTANCE_NEW, move=CarouselMove.NEXT)
        )
        assert result.current is None
        assert result.can_navigate is False
        assert result.cursor == 0

    async def test_unknown_instance(self, plant_instances, plant_photos):
        handler = GetPhotoCarouselQueryHandler(plant_instances, plant_photos)
        with pytest.raises(InstanceNotFoundError):
            await handler.handle(GetPhotoCarouselQuery(instance_id="missing"))


# =============================================================================
# COMMANDS
# =============================================================================

class TestCreatePlantType:
    async def test_creates_with_cover(self, plant_types, storage):
        handler = CreatePlantTypeCommandHandler(plant_types, storage)
        result = await handler.handle(
            CreatePlantTypeCommand(
                genus=" Anthurium ",
                cultivar="Warocqueanum",
                variegation="  ",
                cover_image=make_image("cover.png"),
            )
        )

        assert result.plant.slug == "anthurium-warocqueanum"
        assert result.plant.variegation is None
        assert result.notice == "Plant saved"
        assert result.redirect_to == "/"
        assert storage.uploads == [("plant-types", "anthurium-warocqueanum/cover.png")]
        assert result.plant.cover_image_url == (
            "https://cdn.test/plant-types/anthurium-warocqueanum/cover.png"
        )
        assert await plant_types.get_by_slug("anthurium-warocqueanum") is not None

    async def test_duplicate_slug_is_rejected_before_upload(self, plant_types, storage):
        handler = CreatePlantTypeCommandHandler(plant_types, storage)
        with pytest.raises(DuplicateResourceError):
            await handler.handle(
                CreatePlantTypeCommand(
                    genus="Alocasia",
                    cultivar="Dragon Scale",
                    cover_image=make_image(),
                )
            )
        assert storage.uploads == []

    async def test_slug_override(self, plant_types, storage):
        handler = CreatePlantTypeCommandHandler(plant_types, storage)
        result = await handler.handle(
            CreatePlantTypeCommand(
                genus="Alocasia",
                cultivar="Dragon Scale",
                slug_override="Dragon Scale Two",
                cover_image=make_image(),
            )
        )
        assert result.plant.slug == "dragon-scale-two"

    async def test_empty_slug(self, plant_types, storage):
        handler = CreatePlantTypeCommandHandler(plant_types, storage)
        with pytest.raises(ValidationError):
            await handler.handle(
                CreatePlantTypeCommand(genus="???", cultivar="!!!", cover_image=make_image())
            )

    async def test_upload_failure_leaves_no_row(self, plant_types, storage):
        storage.fail_with = "Bucket not found"
        handler = CreatePlantTypeCommandHandler(plant_types, storage)

        with pytest.raises(FileStorageError) as exc_info:
            await handler.handle(
                CreatePlantTypeCommand(genus="Hoya", cultivar="Kerrii", cover_image=make_image())
            )

        assert exc_info.value.message == "Bucket not found"
        assert await plant_types.get_by_slug("hoya-kerrii") is None


class TestCreatePlantInstance:
    async def test_creates_instance_with_cover_photo(
        self, plant_types, plant_instances, plant_photos, storage
    ):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        result = await handler.handle(
            CreatePlantInstanceCommand(
                type_slug="alocasia-dragon-scale",
                acquired_at="2024-07-01",
                price="350",
                currency="eur",
                size_note="",
                image=make_image("first.jpeg"),
            )
        )

        record = plant_instances.created[-1]
        assert record["type_id"] == ALOCASIA_ID
        assert record["acquired_at"] == "2024-07-01"
        assert record["price"] == 350.0
        assert record["currency"] == "EUR"
        assert record["size_type"] == "baby"
        assert record["source_type"] == "shop"
        assert record["size_note"] is None

        instance_id = result.instance.id
        assert storage.uploads == [
            ("plant-instances", f"alocasia-dragon-scale/{instance_id}/cover.jpeg")
        ]
        assert result.photo.instance_id == instance_id
        assert result.redirect_to == "/plants/alocasia-dragon-scale"
        assert result.notice == "Instance saved"

    async def test_no_price_means_no_currency(
        self, plant_types, plant_instances, plant_photos, storage
    ):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        result = await handler.handle(
            CreatePlantInstanceCommand(type_slug="alocasia-dragon-scale", price="")
        )

        record = plant_instances.created[-1]
        assert record["price"] is None
        assert record["currency"] is None
        assert result.photo is None
        assert storage.uploads == []

    async def test_zero_price_keeps_price_and_currency(
        self, plant_types, plant_instances, plant_photos, storage
    ):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        await handler.handle(
            CreatePlantInstanceCommand(type_slug="alocasia-dragon-scale", price="0")
        )

        record = plant_instances.created[-1]
        assert record["price"] == 0.0
        assert record["currency"] == "CZK"

    async def test_cover_is_validated_once(
        self, plant_types, plant_instances, plant_photos, storage
    ):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        await handler.handle(
            CreatePlantInstanceCommand(
                type_slug="alocasia-dragon-scale", image=make_image("cover.png")
            )
        )

        assert storage.validated == ["cover.png"]
        assert len(storage.uploads) == 1

    async def test_unknown_type(self, plant_types, plant_instances, plant_photos, storage):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        with pytest.raises(PlantTypeNotFoundError):
            await handler.handle(CreatePlantInstanceCommand(type_slug="nope"))
        assert plant_instances.created == []

    async def test_bad_image_is_rejected_before_insert(
        self, plant_types, plant_instances, plant_photos, storage
    ):
        handler = CreatePlantInstanceCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        with pytest.raises(InvalidFileTypeError):
            await handler.handle(
                CreatePlantInstanceCommand(
                    type_slug="alocasia-dragon-scale",
                    image=UploadedImage(filename="notes.txt", data=b"not an image"),
                )
            )
        assert plant_instances.created == []

    def test_invalid_size_type(self):
        with pytest.raises(ValueError):
            CreatePlantInstanceCommand(type_slug="x", size_type="gigantic")

    def test_negative_price(self):
        with pytest.raises(ValueError):
            CreatePlantInstanceCommand(type_slug="x", price=Decimal("-1"))


class TestAddInstancePhotos:
    async def test_uploads_in_order(self, plant_types, plant_instances, plant_photos, storage):
        handler = AddInstancePhotosCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        result = await handler.handle(
            AddInstancePhotosCommand(
                instance_id=INSTANCE_OLD,
                files=[make_image("one.png"), make_image("two.webp")],
            )
        )

        assert len(result.photos) == 2
        paths = [path for _, path in storage.uploads]
        assert paths[0].startswith(f"alocasia-dragon-scale/{INSTANCE_OLD}/")
        assert paths[0].endswith("-0.png")
        assert paths[1].endswith("-1.webp")
        assert paths[0].rsplit("-", 1)[0] == paths[1].rsplit("-", 1)[0]
        assert result.notice == "Photos added"
        assert len(await plant_photos.list_by_instance(INSTANCE_OLD)) == 5

    async def test_empty_selection(self, plant_types, plant_instances, plant_photos, storage):
        handler = AddInstancePhotosCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        with pytest.raises(ValidationError) as exc_info:
            await handler.handle(AddInstancePhotosCommand(instance_id=INSTANCE_OLD, files=[]))

        assert exc_info.value.message == "Select at least one photo."
        assert storage.uploads == []

    async def test_stops_at_first_failure(self, plant_types, plant_instances, plant_photos, storage):
        handler = AddInstancePhotosCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        with pytest.raises(InvalidFileTypeError):
            await handler.handle(
                AddInstancePhotosCommand(
                    instance_id=INSTANCE_OLD,
                    files=[
                        make_image("ok.png"),
                        UploadedImage(filename="broken.png", data=b"\x89PNG broken"),
                        make_image("never.png"),
                    ],
                )
            )

        assert len(storage.uploads) == 1
        assert len(await plant_photos.list_by_instance(INSTANCE_OLD)) == 4

    async def test_unknown_instance(self, plant_types, plant_instances, plant_photos, storage):
        handler = AddInstancePhotosCommandHandler(
            plant_types, plant_instances, plant_photos, storage
        )
        with pytest.raises(InstanceNotFoundError):
            await handler.handle(
                AddInstancePhotosCommand(instance_id="missing", files=[make_image()])
            )


class TestSetFeaturedPhoto:
    async def test_features_exactly_one(self, plant_photos):
        result = await SetFeaturedPhotoCommandHandler(plant_photos).handle(
            SetFeaturedPhotoCommand(instance_id=INSTANCE_OLD, photo_id="photo-jan")
        )

        assert plant_photos.featured_ids(INSTANCE_OLD) == ["photo-jan"]
        assert result.featured_photo_id == "photo-jan"
        assert [p.id for p in result.photos] == ["photo-jan", "photo-mar", "photo-feb"]
        assert result.cursor == 0

    async def test_featuring_twice_is_stable(self, plant_photos):
        handler = SetFeaturedPhotoCommandHandler(plant_photos)
        command = SetFeaturedPhotoCommand(instance_id=INSTANCE_OLD, photo_id="photo-mar")

        await handler.handle(command)
        result = await handler.handle(command)

        assert plant_photos.featured_ids(INSTANCE_OLD) == ["photo-mar"]
        assert result.featured_photo_id == "photo-mar"

    async def test_unknown_photo_makes_no_remote_call(self, plant_photos):
        with pytest.raises(PhotoNotFoundError):
            await SetFeaturedPhotoCommandHandler(plant_photos).handle(
                SetFeaturedPhotoCommand(instance_id=INSTANCE_OLD, photo_id="photo-monstera")
            )

        assert plant_photos.set_featured_calls == []
        assert plant_photos.featured_ids(INSTANCE_OLD) == ["photo-feb"]

    async def test_backend_failure_leaves_order_unchanged(self, plant_photos):
        plant_photos.fail_writes_with = "connection reset"

        with pytest.raises(ExternalServiceError) as exc_info:
            await SetFeaturedPhotoCommandHandler(plant_photos).handle(
                SetFeaturedPhotoCommand(instance_id=INSTANCE_OLD, photo_id="photo-jan")
            )

        assert exc_info.value.message == "connection reset"
        assert plant_photos.set_featured_calls == [(INSTANCE_OLD, "photo-jan")]
        assert plant_photos.featured_ids(INSTANCE_OLD) == ["photo-feb"]
