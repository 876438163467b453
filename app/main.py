# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the PlantsByJulie service, connects all its parts
# together, and gets it ready to answer the website.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: logging setup, middleware stack, slowapi
# limiter registration, exception handlers, router registration and uvicorn runner.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - app.shared.config.settings / supabase
# - app.api.v1 (routers), app.api.middleware
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api import API_PREFIX, CURRENT_VERSION
from app.api.middleware import REQUEST_ID_HEADER, RequestLoggingMiddleware, register_exception_handlers
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.modules.auth.presentation.api.v1 import limiter
from app.shared.config.settings import get_settings
from app.shared.config.supabase import cleanup_supabase
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

API_V1_PREFIX = f"{API_PREFIX}/{CURRENT_VERSION}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Supabase clients are created lazily on first use; shutdown drops them.
    """
    logger.info(f"🌱 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    try:
        yield
    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        await cleanup_supabase()
        logger.info("✅ Shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # slowapi looks the limiter up on app.state
    app.state.limiter = limiter

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router, tags=["Health Check"])
    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/health",
            "api_base": API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn (python -m app.main).
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
