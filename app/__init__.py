# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the PlantsByJulie collection service and records
# its version and name.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata for the
# PlantsByJulie FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (version)

"""
PlantsByJulie - Houseplant Collection API

Backend for a houseplant collector's catalog: plant types, the instances owned of each,
their photos, and the list of plants available for swap. Storage, auth sessions and
files live in Supabase.
"""

__version__ = "1.0.0"
__title__ = "PlantsByJulie API"
__description__ = "Houseplant catalog and inventory backend"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
