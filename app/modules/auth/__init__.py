# 📄 File: app/modules/auth/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles logging in and out, and works out whether the visitor is the collection owner.
# 🧪 Purpose (Technical Summary):
# Auth module: thin plumbing over Supabase Auth (password sign-in, token lookup), session
# cookies, and the request-scoped user/admin dependencies.
# 🔗 Dependencies:
# supabase (auth), FastAPI, slowapi
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, catalog admin endpoints (admin gate)

__version__ = "1.0.0"
__module_name__ = "auth"
__description__ = "Supabase Auth session plumbing"
