"""
Pytest configuration and fixtures for the PlantsByJulie API.

The app is wired to in-memory stand-ins for the Supabase tables, storage
buckets and auth service, so no test touches the network.
"""

import io
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

# Settings are read once and cached; configure them before importing the app.
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["ENVIRONMENT"] = "testing"
os.environ["ADMIN_EMAIL"] = "Julie@Example.com"
os.environ["SESSION_COOKIE_SECURE"] = "false"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOGIN_RATE_LIMIT"] = "5/minute"

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image

from app.main import create_application
from app.modules.auth.domain.models import AuthSession, AuthUser
from app.modules.auth.presentation.api.v1 import limiter
from app.modules.auth.presentation.dependencies import get_auth_service
from app.modules.catalog.domain.models.plant_instance import PlantInstance
from app.modules.catalog.domain.models.plant_photo import PlantPhoto
from app.modules.catalog.domain.models.plant_type import PlantType
from app.modules.catalog.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.catalog.domain.repositories.plant_photo_repository import PlantPhotoRepository
from app.modules.catalog.domain.repositories.plant_type_repository import PlantTypeRepository
from app.modules.catalog.infrastructure.database import (
    get_plant_instance_repository,
    get_plant_photo_repository,
    get_plant_type_repository,
)
from app.shared.config.settings import get_settings
from app.shared.config.supabase import get_supabase_manager
from app.shared.core.exceptions import AuthenticationError, FileStorageError, RepositoryError
from app.shared.infrastructure.storage.supabase_storage import (
    SupabaseStorageService,
    UploadedImage,
    get_storage_service,
)

ADMIN_EMAIL = "julie@example.com"
ADMIN_PASSWORD = "monstera-4-ever"
ADMIN_TOKEN = "admin-token"
VISITOR_TOKEN = "visitor-token"

ALOCASIA_ID = "type-alocasia"
MONSTERA_ID = "type-monstera"
PHILODENDRON_ID = "type-philodendron"

INSTANCE_OLD = "inst-alocasia-old"
INSTANCE_NEW = "inst-alocasia-new"
INSTANCE_MONSTERA = "inst-monstera"
INSTANCE_ORPHAN = "inst-orphan"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def make_png(color=(46, 139, 87)) -> bytes:
    """A tiny valid PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_image(filename: str = "leaf.png") -> UploadedImage:
    return UploadedImage(filename=filename, data=make_png(), content_type="image/png")


# =============================================================================
# IN-MEMORY REPOSITORIES
# =============================================================================

class InMemoryPlantTypeRepository(PlantTypeRepository):
    def __init__(self, plants: Sequence[PlantType] = ()):
        self.plants: Dict[str, PlantType] = {plant.id: plant for plant in plants}

    async def list_all(self) -> List[PlantType]:
        return sorted(self.plants.values(), key=lambda plant: (plant.genus, plant.cultivar))

    async def get_by_slug(self, slug: str) -> Optional[PlantType]:
        return next((plant for plant in self.plants.values() if plant.slug == slug), None)

    async def get_by_id(self, type_id: str) -> Optional[PlantType]:
        return self.plants.get(type_id)

    async def get_by_ids(self, type_ids: Sequence[str]) -> List[PlantType]:
        return [self.plants[type_id] for type_id in type_ids if type_id in self.plants]

    async def create(self, values: Dict[str, Any]) -> PlantType:
        plant = PlantType.from_record({"id": str(uuid4()), **values})
        self.plants[plant.id] = plant
        return plant


class InMemoryPlantInstanceRepository(PlantInstanceRepository):
    def __init__(self, instances: Sequence[PlantInstance] = ()):
        self.instances: Dict[str, PlantInstance] = {item.id: item for item in instances}
        self.created: List[Dict[str, Any]] = []

    def _newest_first(self, instances) -> List[PlantInstance]:
        return sorted(instances, key=lambda item: item.created_at or "", reverse=True)

    async def list_by_type(self, type_id: str) -> List[PlantInstance]:
        return self._newest_first(i for i in self.instances.values() if i.type_id == type_id)

    async def list_for_swap(self) -> List[PlantInstance]:
        return self._newest_first(i for i in self.instances.values() if i.for_swap)

    async def get_by_id(self, instance_id: str) -> Optional[PlantInstance]:
        return self.instances.get(instance_id)

    async def create(self, values: Dict[str, Any]) -> PlantInstance:
        self.created.append(values)
        instance = PlantInstance.from_record(
            {"id": str(uuid4()), "created_at": now_iso(), **values}
        )
        self.instances[instance.id] = instance
        return instance


class InMemoryPlantPhotoRepository(PlantPhotoRepository):
    def __init__(self, photos: Sequence[PlantPhoto] = ()):
        self.photos: List[PlantPhoto] = list(photos)
        self.set_featured_calls: List[tuple] = []
        self.fail_writes_with: Optional[str] = None

    async def list_by_instance(self, instance_id: str) -> List[PlantPhoto]:
        return [photo for photo in self.photos if photo.instance_id == instance_id]

    async def list_by_instances(self, instance_ids: Sequence[str]) -> List[PlantPhoto]:
        return [photo for photo in self.photos if photo.instance_id in instance_ids]

    async def create(self, values: Dict[str, Any]) -> PlantPhoto:
        if self.fail_writes_with:
            raise RepositoryError(
                message=self.fail_writes_with, operation="insert", entity="plant_photos"
            )
        photo = PlantPhoto.from_record({"id": str(uuid4()), "created_at": now_iso(), **values})
        self.photos.append(photo)
        return photo

    async def set_featured(self, instance_id: str, photo_id: str) -> None:
        self.set_featured_calls.append((instance_id, photo_id))
        if self.fail_writes_with:
            raise RepositoryError(
                message=self.fail_writes_with,
                operation="set_featured",
                entity="plant_photos",
            )
        self.photos = [
            photo.with_featured(photo.id == photo_id) if photo.instance_id == instance_id else photo
            for photo in self.photos
        ]

    def featured_ids(self, instance_id: str) -> List[str]:
        return [p.id for p in self.photos if p.instance_id == instance_id and p.is_featured]


# =============================================================================
# STORAGE AND AUTH STAND-INS
# =============================================================================

class RecordingStorageService(SupabaseStorageService):
    """Real path rules and image validation; uploads are only recorded."""

    def __init__(self):
        super().__init__(client=None, settings=get_settings())
        self.uploads: List[tuple] = []
        self.validated: List[str] = []
        self.fail_with: Optional[str] = None

    def validate_image(self, image: UploadedImage) -> None:
        self.validated.append(image.filename)
        super().validate_image(image)

    async def upload_image(
        self, bucket: str, path: str, image: UploadedImage, validate: bool = True
    ) -> str:
        if validate:
            self.validate_image(image)
        if self.fail_with:
            raise FileStorageError(
                message=self.fail_with,
                operation="upload",
                filename=image.filename,
                storage_path=f"{bucket}/{path}",
            )
        self.uploads.append((bucket, path))
        return f"https://cdn.test/{bucket}/{path}"


class FakeAuthService:
    def __init__(self):
        self.users = {
            ADMIN_TOKEN: AuthUser(id="user-julie", email=ADMIN_EMAIL),
            VISITOR_TOKEN: AuthUser(id="user-visitor", email="visitor@example.com"),
        }

    async def sign_in(self, email: str, password: str) -> AuthSession:
        if email.lower() != ADMIN_EMAIL or password != ADMIN_PASSWORD:
            raise AuthenticationError("Invalid login credentials")
        return AuthSession(
            user=self.users[ADMIN_TOKEN],
            access_token=ADMIN_TOKEN,
            refresh_token="refresh-token",
            expires_in=3600,
        )

    async def get_user(self, token: str) -> Optional[AuthUser]:
        return self.users.get(token)


class HealthyManager:
    def health_check(self) -> dict:
        return {"database_service": True, "error": None}


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def plant_types() -> InMemoryPlantTypeRepository:
    """Three plant types; only Alocasia has a cover image."""
    return InMemoryPlantTypeRepository([
        PlantType(
            id=ALOCASIA_ID,
            genus="Alocasia",
            cultivar="Dragon Scale",
            slug="alocasia-dragon-scale",
            cover_image_url="https://cdn.test/plant-types/alocasia-dragon-scale/cover.jpg",
        ),
        PlantType(
            id=MONSTERA_ID,
            genus="Monstera",
            cultivar="Deliciosa",
            variegation="Thai Constellation",
            slug="monstera-deliciosa-thai-constellation",
        ),
        PlantType(
            id=PHILODENDRON_ID,
            genus="Philodendron",
            cultivar="Pink Princess",
            slug="philodendron-pink-princess",
        ),
    ])


@pytest.fixture
def plant_instances() -> InMemoryPlantInstanceRepository:
    """Two Alocasias, one Monstera, and a swap plant whose type is gone."""
    return InMemoryPlantInstanceRepository([
        PlantInstance(
            id=INSTANCE_OLD,
            type_id=ALOCASIA_ID,
            price="1200",
            currency="CZK",
            size_type="mature",
            source_type="shop",
            seller_name="Green Corner",
            plant_number=1,
            created_at="2024-03-01T10:00:00+00:00",
        ),
        PlantInstance(
            id=INSTANCE_NEW,
            type_id=ALOCASIA_ID,
            size_type="baby",
            for_swap=True,
            plant_number=2,
            created_at="2024-05-10T10:00:00+00:00",
        ),
        PlantInstance(
            id=INSTANCE_MONSTERA,
            type_id=MONSTERA_ID,
            for_swap=True,
            created_at="2024-04-01T10:00:00+00:00",
        ),
        PlantInstance(
            id=INSTANCE_ORPHAN,
            type_id="type-deleted",
            for_swap=True,
            plant_number=7,
            created_at="2024-06-01T10:00:00+00:00",
        ),
    ])


@pytest.fixture
def plant_photos() -> InMemoryPlantPhotoRepository:
    """
    Photos of the older Alocasia display as: featured, undated-but-recent, oldest.
    """
    return InMemoryPlantPhotoRepository([
        PlantPhoto(
            id="photo-jan",
            instance_id=INSTANCE_OLD,
            url="https://cdn.test/jan.jpg",
            taken_at="2024-01-01",
        ),
        PlantPhoto(
            id="photo-feb",
            instance_id=INSTANCE_OLD,
            url="https://cdn.test/feb.jpg",
            taken_at="2024-02-01",
            is_featured=True,
        ),
        PlantPhoto(
            id="photo-mar",
            instance_id=INSTANCE_OLD,
            url="https://cdn.test/mar.jpg",
            created_at="2024-03-05T08:00:00+00:00",
        ),
        PlantPhoto(
            id="photo-monstera",
            instance_id=INSTANCE_MONSTERA,
            url="https://cdn.test/monstera.jpg",
            created_at="2024-04-02T08:00:00+00:00",
        ),
    ])


@pytest.fixture
def storage() -> RecordingStorageService:
    return RecordingStorageService()


@pytest.fixture
def app(plant_types, plant_instances, plant_photos, storage) -> FastAPI:
    """Application with every Supabase-facing dependency replaced."""
    application = create_application()
    auth_service = FakeAuthService()

    application.dependency_overrides[get_plant_type_repository] = lambda: plant_types
    application.dependency_overrides[get_plant_instance_repository] = lambda: plant_instances
    application.dependency_overrides[get_plant_photo_repository] = lambda: plant_photos
    application.dependency_overrides[get_storage_service] = lambda: storage
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_supabase_manager] = lambda: HealthyManager()

    limiter.reset()
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def visitor_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {VISITOR_TOKEN}"}
