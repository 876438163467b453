# 📄 File: app/modules/catalog/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "use cases" of the collection: browsing, viewing a plant, the swap list, and the
# admin actions that add plants and photos.
# 🧪 Purpose (Technical Summary):
# Application layer: CQRS commands and queries, result DTOs and their handlers.
# 🔗 Dependencies:
# Domain layer, infrastructure repositories, storage service
# 🔄 Connected Modules / Calls From:
# app.modules.catalog.presentation.api.v1
