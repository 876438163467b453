# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the plant collection API: what was asked for, how it
# ended and how long it took, with a tracking number that appears on every log line.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: assigns or propagates X-Request-ID, binds it to the logging
# context for the duration of the request, and logs method, path, status and duration.
# 🔗 Dependencies:
# FastAPI/starlette, app.shared.utils.logging (log_context)
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
import uuid
from typing import Optional, Set

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Probe endpoints are hit constantly; their access lines are skipped
DEFAULT_EXCLUDED_PATHS = {"/health", "/health/live", "/health/ready", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware with request correlation.

    Features:
    - Request id taken from the incoming X-Request-ID header or generated
    - Request id available as request.state.request_id and in every log record
    - One access line per request with status and duration
    """

    def __init__(self, app: ASGIApp, excluded_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.excluded_paths = DEFAULT_EXCLUDED_PATHS if excluded_paths is None else excluded_paths

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.exception(
                    f"{request.method} {request.url.path} failed after {duration_ms:.1f}ms"
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id

            if request.url.path not in self.excluded_paths:
                level = logging.WARNING if response.status_code >= 400 else logging.INFO
                logger.log(
                    level,
                    f"{request.method} {request.url.path} -> {response.status_code} "
                    f"in {duration_ms:.1f}ms",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": round(duration_ms, 1),
                        "client_ip": request.client.host if request.client else None,
                    },
                )

            return response
