# 📄 File: app/modules/catalog/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts of the catalog that actually talk to Supabase.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: PostgREST-backed repository implementations and their providers.
# 🔗 Dependencies:
# supabase, postgrest
# 🔄 Connected Modules / Calls From:
# Application handlers through FastAPI dependency injection
