# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that wrap every request: request logging and error formatting.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware and exception handler registration.
# 🔗 Dependencies:
# logging.py, error_handling.py
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
PlantsByJulie API Middleware Package

Middleware Stack Order (outermost first):
    1. GZipMiddleware
    2. CORSMiddleware
    3. RequestLoggingMiddleware (request id, access log)
    4. Application Routes (exception handlers format errors)

Authentication is resolved per endpoint through FastAPI dependencies
(app.modules.auth.presentation.dependencies), not in middleware.
"""

from .error_handling import error_response, register_exception_handlers
from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "REQUEST_ID_HEADER",
    "register_exception_handlers",
    "error_response",
]
