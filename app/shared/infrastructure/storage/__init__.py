# 📄 File: app/shared/infrastructure/storage/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the file storage that keeps plant cover pictures and plant photos.
#
# 🧪 Purpose (Technical Summary):
# Exposes the Supabase Storage service, the in-memory upload value object and the
# dependency provider.
#
# 🔗 Dependencies:
# - app/shared/infrastructure/storage/supabase_storage.py
#
# 🔄 Connected Modules / Calls From:
# - Catalog command handlers (cover and photo uploads)

from .supabase_storage import SupabaseStorageService, UploadedImage, get_storage_service

__all__ = ["SupabaseStorageService", "UploadedImage", "get_storage_service"]
