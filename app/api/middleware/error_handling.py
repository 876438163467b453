# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches errors anywhere in the app and turns them into one consistent error message
# shape, so the front end can always show what went wrong.
# 🧪 Purpose (Technical Summary):
# Registers FastAPI exception handlers rendering every failure as
# {"error": {code, message, details, timestamp, request_id}}: application exceptions,
# request/command validation errors, HTTP errors, rate limiting and unexpected errors.
# 🔗 Dependencies:
# FastAPI, starlette, pydantic, slowapi, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main.py (handler registration)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import (
    PlantCatalogException,
    exception_to_dict,
    is_client_error,
)

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "AUTHENTICATION_ERROR",
    403: "AUTHORIZATION_ERROR",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "FILE_TOO_LARGE",
    415: "INVALID_FILE_TYPE",
    429: "RATE_LIMIT_EXCEEDED",
}


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": jsonable_encoder(details or {}),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
    )


def _validation_details(errors) -> Dict[str, Any]:
    return {
        "errors": [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg"),
                "type": error.get("type"),
            }
            for error in errors
        ]
    }


async def plant_catalog_exception_handler(
    request: Request, exc: PlantCatalogException
) -> JSONResponse:
    """Handle application exceptions."""
    if is_client_error(exc):
        logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
    else:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")

    error = exception_to_dict(exc)["error"]
    return error_response(
        request,
        status_code=exc.status_code,
        code=error["code"],
        message=error["message"],
        details=error["details"],
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies, forms and query parameters."""
    return error_response(
        request,
        status_code=422,
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details=_validation_details(exc.errors()),
    )


async def command_validation_exception_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Handle commands and queries built from form input that fail their own validation."""
    return error_response(
        request,
        status_code=422,
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details=_validation_details(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing and framework HTTP errors (unknown paths, wrong methods)."""
    if exc.status_code == 404:
        message = "The requested resource was not found"
        details = {"path": str(request.url.path)}
    else:
        message = str(exc.detail)
        details = {}
    return error_response(
        request,
        status_code=exc.status_code,
        code=HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        message=message,
        details=details,
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    return error_response(
        request,
        status_code=429,
        code="RATE_LIMIT_EXCEEDED",
        message=f"Too many requests: {exc.detail}",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors with a generic message."""
    logger.error(f"Internal server error: {exc}", exc_info=exc)
    settings = get_settings()
    return error_response(
        request,
        status_code=500,
        code="INTERNAL_SERVER_ERROR",
        message="An internal server error occurred",
        details={"error_type": type(exc).__name__, "error": str(exc)} if settings.DEBUG else {},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlantCatalogException, plant_catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, command_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
