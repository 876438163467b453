# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the rest of the plant collection app in one organized place.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.config.supabase (client construction)
# - Storage service, auth dependencies, logging setup

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="PlantsByJulie API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Houseplant catalog, inventory and swap list",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json|text)")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # SUPABASE
    # =========================================================================

    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_ANON_KEY: str = Field(..., description="Supabase anonymous key")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(
        default=None,
        description="Supabase service role key, used for admin writes when set"
    )

    # Storage
    SUPABASE_STORAGE_BUCKET: str = Field(
        default="plant-types",
        description="Bucket holding plant type cover images"
    )
    SUPABASE_INSTANCE_BUCKET: str = Field(
        default="plant-instances",
        description="Bucket holding plant instance photos"
    )
    MAX_UPLOAD_BYTES: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted size of a single uploaded image"
    )

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    ADMIN_EMAIL: Optional[str] = Field(
        default=None,
        description="Email of the single collection administrator"
    )
    SESSION_COOKIE_SECURE: bool = Field(
        default=True,
        description="Mark session cookies as Secure"
    )
    LOGIN_RATE_LIMIT: str = Field(
        default="10/minute",
        description="Login rate limit in '<limit>/<period>' format"
    )

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        allowed = ["development", "testing", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level setting."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v_upper

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",") if origin.strip()]
        if not origins:
            raise ValueError("CORS_ORIGINS must contain at least one origin")
        return ",".join(origins)

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as list."""
        return self.CORS_ORIGINS.split(",")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "testing"

    @property
    def admin_email(self) -> Optional[str]:
        """Admin email normalized for case-insensitive comparison."""
        if not self.ADMIN_EMAIL or not self.ADMIN_EMAIL.strip():
            return None
        return self.ADMIN_EMAIL.strip().lower()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
