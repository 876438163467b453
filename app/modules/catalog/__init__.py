# 📄 File: app/modules/catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about the plant collection: plant kinds, the plants owned of each
# kind, their photos, and which ones are up for swap.
# 🧪 Purpose (Technical Summary):
# Package initialization for the catalog module, implementing domain-driven design with a
# CQRS-style application layer over Supabase-backed repositories.
# 🔗 Dependencies:
# FastAPI, pydantic, supabase, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Catalog Module

Architecture follows Domain-Driven Design:
- Domain: PlantType / PlantInstance / PlantPhoto, the catalog filter and the photo sequencer
- Application: Commands, queries and their handlers
- Infrastructure: Supabase table repositories
- Presentation: API endpoints and request/response schemas
"""

__version__ = "1.0.0"
__module_name__ = "catalog"
__description__ = "Plant Types, Instances, Photos and Swap List"

CATALOG_CONFIG = {
    "version": __version__,
    "module_name": __module_name__,
    "description": __description__,
    "tables": ["plant_types", "plant_instances", "plant_photos"],
    "rpc": ["set_featured_photo"],
}
