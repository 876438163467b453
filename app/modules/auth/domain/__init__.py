# 📄 File: app/modules/auth/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# What a logged-in user and a login session look like.
# 🧪 Purpose (Technical Summary):
# Auth value objects and the admin rule.
# 🔗 Dependencies:
# models.py
# 🔄 Connected Modules / Calls From:
# supabase_auth.py, presentation dependencies and routes

from .models import AuthSession, AuthUser, is_admin_email

__all__ = ["AuthSession", "AuthUser", "is_admin_email"]
