# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the plant
# collection service uses, like settings, error types and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions, logging, helpers and
# the storage infrastructure.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings)
- Supabase client management
- Exception hierarchy
- Structured logging (python-json-logger)
- Slug and file helpers
- Supabase Storage service
"""

__all__ = []
