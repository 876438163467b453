# 📄 File: app/modules/catalog/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Catalog web endpoints.
# 🧪 Purpose (Technical Summary):
# API package for the catalog module.
# 🔗 Dependencies:
# v1 routers
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
