# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox other parts of the app use for logging, making web-address names
# (slugs) out of plant names, and reading file extensions.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging setup and general helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities (python-json-logger)
# - helpers: Slug generation, file extension and number formatting

# 🔄 Connected Modules / Calls From:
# Used by: catalog domain models, storage service, app.main, middleware

from .helpers import current_millis, format_number, generate_slug, get_file_extension
from .logging import log_context, setup_logging

__all__ = [
    "generate_slug",
    "get_file_extension",
    "format_number",
    "current_millis",
    "setup_logging",
    "log_context",
]
