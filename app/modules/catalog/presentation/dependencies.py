# 📄 File: app/modules/catalog/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Turns files sent from the browser into pictures the catalog can store.
# 🧪 Purpose (Technical Summary):
# Reads FastAPI UploadFile parts into UploadedImage values; empty file parts (a file input
# submitted with nothing selected) are dropped.
# 🔗 Dependencies:
# FastAPI UploadFile, app.shared.infrastructure.storage
# 🔄 Connected Modules / Calls From:
# app.modules.catalog.presentation.api.v1.plants / instances

from typing import List, Optional, Sequence

from fastapi import UploadFile

from app.shared.infrastructure.storage.supabase_storage import UploadedImage


async def read_upload(upload: Optional[UploadFile]) -> Optional[UploadedImage]:
    if upload is None or not upload.filename:
        return None
    data = await upload.read()
    await upload.close()
    if not data:
        return None
    return UploadedImage(filename=upload.filename, data=data, content_type=upload.content_type)


async def read_uploads(uploads: Optional[Sequence[UploadFile]]) -> List[UploadedImage]:
    images = []
    for upload in uploads or []:
        image = await read_upload(upload)
        if image is not None:
            images.append(image)
    return images
