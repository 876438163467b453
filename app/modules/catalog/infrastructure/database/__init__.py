# 📄 File: app/modules/catalog/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Hands out the objects that read and write plant kinds, plants and photos in Supabase.
#
# 🧪 Purpose (Technical Summary):
# Re-exports the Supabase repository implementations and provides the FastAPI dependency
# functions that bind each repository interface to its implementation.
#
# 🔗 Dependencies:
# - FastAPI Depends
# - app.shared.config.supabase (public and service-role clients)
# - app.modules.catalog.domain.repositories (interface definitions)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.catalog.application.handlers (injected repositories)
# - tests (overridden with in-memory fakes)

from fastapi import Depends
from supabase import Client

from app.modules.catalog.domain.repositories.plant_type_repository import PlantTypeRepository
from app.modules.catalog.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.catalog.domain.repositories.plant_photo_repository import PlantPhotoRepository
from app.shared.config.supabase import get_supabase_admin_client, get_supabase_client

from .plant_type_repository_impl import PlantTypeRepositoryImpl
from .plant_instance_repository_impl import PlantInstanceRepositoryImpl
from .plant_photo_repository_impl import PlantPhotoRepositoryImpl


def get_plant_type_repository(
    client: Client = Depends(get_supabase_client),
    admin_client: Client = Depends(get_supabase_admin_client),
) -> PlantTypeRepository:
    return PlantTypeRepositoryImpl(client, admin_client)


def get_plant_instance_repository(
    client: Client = Depends(get_supabase_client),
    admin_client: Client = Depends(get_supabase_admin_client),
) -> PlantInstanceRepository:
    return PlantInstanceRepositoryImpl(client, admin_client)


def get_plant_photo_repository(
    client: Client = Depends(get_supabase_client),
    admin_client: Client = Depends(get_supabase_admin_client),
) -> PlantPhotoRepository:
    return PlantPhotoRepositoryImpl(client, admin_client)


__all__ = [
    "PlantTypeRepositoryImpl",
    "PlantInstanceRepositoryImpl",
    "PlantPhotoRepositoryImpl",
    "get_plant_type_repository",
    "get_plant_instance_repository",
    "get_plant_photo_repository",
]
