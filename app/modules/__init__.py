# 📄 File: app/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the feature areas of the service: the plant catalog and login.
# 🧪 Purpose (Technical Summary):
# Namespace package for the domain modules (catalog, auth), each laid out as
# domain / application / infrastructure / presentation.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
