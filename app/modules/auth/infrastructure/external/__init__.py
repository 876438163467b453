# 📄 File: app/modules/auth/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Outside services used for login.
# 🧪 Purpose (Technical Summary):
# External integrations: the Supabase Auth adapter.
# 🔗 Dependencies:
# supabase_auth.py
# 🔄 Connected Modules / Calls From:
# app.modules.auth.presentation.dependencies

from .supabase_auth import SupabaseAuthService

__all__ = ["SupabaseAuthService"]
