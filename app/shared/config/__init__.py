# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the collection app how to reach Supabase
# and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and the Supabase client manager.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - supabase.py (Supabase client configuration)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Supabase integration settings
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
