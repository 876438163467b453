# 📄 File: app/modules/auth/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The part of login that talks to Supabase.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the auth module.
# 🔗 Dependencies:
# supabase
# 🔄 Connected Modules / Calls From:
# app.modules.auth.presentation
