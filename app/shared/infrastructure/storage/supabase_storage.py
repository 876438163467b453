# 📄 File: app/shared/infrastructure/storage/supabase_storage.py

# 🧭 Purpose (Layman Explanation):
# This file uploads plant pictures to cloud storage, files them in tidy folders,
# and hands back the public web address of each picture.

# 🧪 Purpose (Technical Summary):
# Supabase Storage wrapper: image validation with Pillow, size limits, the bucket path
# conventions for cover images and instance photos, upsert uploads, and public URL lookup.

# 🔗 Dependencies:
# - supabase: Storage client
# - PIL (Pillow): Image validation
# - app.shared.utils.helpers: File extension and timestamp helpers

# 🔄 Connected Modules / Calls From:
# Called by: catalog command handlers (create plant type, create instance, add photos)
# Connects to: Supabase Storage buckets `plant-types` and `plant-instances`

import io
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError
from supabase import Client

from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import get_supabase_admin_client
from app.shared.core.exceptions import (
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError,
)
from app.shared.utils.helpers import current_millis, get_file_extension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedImage:
    """An uploaded file read fully into memory."""

    filename: str
    data: bytes
    content_type: Optional[str] = None

    @property
    def extension(self) -> str:
        return get_file_extension(self.filename)


class SupabaseStorageService:
    """
    Storage operations for catalog images.

    Paths:
    - type cover:      {slug}/cover.{ext}                        (type bucket)
    - instance cover:  {type_slug}/{instance_id}/cover.{ext}     (instance bucket)
    - instance photo:  {type_slug}/{instance_id}/{millis}-{i}.{ext} (instance bucket)
    """

    def __init__(self, client: Client, settings: Settings):
        self._client = client
        self.type_bucket = settings.SUPABASE_STORAGE_BUCKET
        self.instance_bucket = settings.SUPABASE_INSTANCE_BUCKET
        self.max_upload_bytes = settings.MAX_UPLOAD_BYTES

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def type_cover_path(slug: str, image: UploadedImage) -> str:
        return f"{slug}/cover.{image.extension}"

    @staticmethod
    def instance_cover_path(type_slug: str, instance_id: str, image: UploadedImage) -> str:
        return f"{type_slug}/{instance_id}/cover.{image.extension}"

    @staticmethod
    def instance_photo_path(
        type_slug: str,
        instance_id: str,
        image: UploadedImage,
        index: int,
        millis: Optional[int] = None,
    ) -> str:
        stamp = millis if millis is not None else current_millis()
        return f"{type_slug}/{instance_id}/{stamp}-{index}.{image.extension}"

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_image(self, image: UploadedImage) -> None:
        """
        Reject empty, oversized, or undecodable uploads before touching storage.

        Raises:
            FileTooLargeError: over MAX_UPLOAD_BYTES
            InvalidFileTypeError: empty or not an image Pillow can identify
        """
        size = len(image.data)
        if size > self.max_upload_bytes:
            raise FileTooLargeError(
                max_size_mb=round(self.max_upload_bytes / (1024 * 1024), 2),
                actual_size_mb=round(size / (1024 * 1024), 2),
                filename=image.filename,
            )
        if size == 0:
            raise InvalidFileTypeError(
                message="Uploaded file is empty",
                filename=image.filename,
                content_type=image.content_type,
            )

        try:
            with Image.open(io.BytesIO(image.data)) as probe:
                probe.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            logger.warning(f"Rejected non-image upload {image.filename}: {e}")
            raise InvalidFileTypeError(
                message="Uploaded file is not a supported image",
                filename=image.filename,
                content_type=image.content_type,
            ) from e

    # -------------------------------------------------------------------------
    # Upload
    # -------------------------------------------------------------------------

    async def upload_image(
        self, bucket: str, path: str, image: UploadedImage, validate: bool = True
    ) -> str:
        """
        Upload (upsert) an image and return its public URL.

        Args:
            bucket: Storage bucket name
            path: Object path inside the bucket
            image: The uploaded file
            validate: Pass False when the caller already ran validate_image

        Raises:
            FileStorageError: with the storage provider's message
        """
        if validate:
            self.validate_image(image)
        storage = self._client.storage.from_(bucket)

        try:
            storage.upload(
                path=path,
                file=image.data,
                file_options={
                    "content-type": image.content_type or "application/octet-stream",
                    "upsert": "true",
                },
            )
        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            logger.error(f"Failed to upload {path} to {bucket}: {message}")
            raise FileStorageError(
                message=message,
                operation="upload",
                filename=image.filename,
                storage_path=f"{bucket}/{path}",
            ) from e

        public_url = storage.get_public_url(path)
        logger.info(f"File uploaded successfully: {bucket}/{path}")
        return public_url


def get_storage_service() -> SupabaseStorageService:
    """FastAPI dependency provider for the storage service."""
    return SupabaseStorageService(get_supabase_admin_client(), get_settings())
