"""
Configuration management for the my-todo application.

Settings are loaded from environment variables (or a .env file) and
validated once at import time.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- One settings object shared by the REST API and the browser UI
- Properties for computed values (is_production, is_development)
"""

from typing import Any, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: DATABASE_URL=postgresql://localhost/todos python run.py

    Configuration sections:
    1. Database - SQLAlchemy connection URL
    2. API client - where the browser UI reaches the REST API
    3. Application - runtime behavior and logging
    4. Server - HTTP server configuration
    5. Security - CORS settings
    """

    # ===== Database Configuration =====
    database_url: str = Field(
        default="sqlite:///./my_todo.db",
        description="SQLAlchemy database URL for todo and label storage"
    )

    # ===== API Client Configuration =====
    api_base_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL the browser UI uses to reach the REST API"
    )
    api_timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds for REST API calls (unset = no timeout)"
    )

    # ===== Application Settings =====
    app_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    log_level: str = Field(
        default="info",
        pattern="^(debug|info|warning|error|critical)$",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="127.0.0.1",
        description="Server bind host"
    )
    server_port: int = Field(
        default=8000,
        ge=1024, le=65535,
        description="Server port"
    )

    # ===== Security Configuration =====
    cors_origins: Union[str, list[str]] = Field(
        default="",
        description="Allowed CORS origins - comma-separated string or list"
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are joined with a leading slash."""
        if not v or v.strip() == "":
            raise ValueError("api_base_url cannot be empty")
        return v.rstrip("/")

    @field_validator("api_timeout", mode="before")
    @classmethod
    def parse_api_timeout(cls, value: Any) -> Any:
        """An empty API_TIMEOUT means no timeout."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @model_validator(mode="after")
    def parse_cors_origins(self):
        """Parse cors_origins from string to list and validate."""
        cors_value = self.cors_origins
        if isinstance(cors_value, str):
            if not cors_value or cors_value.strip() == "":
                self.cors_origins = []
            else:
                self.cors_origins = [origin.strip() for origin in cors_value.split(",") if origin.strip()]

        if self.app_env == "production" and "*" in self.cors_origins:
            raise ValueError("CORS wildcard not allowed in production")

        # Original frontend dev server
        if not self.cors_origins:
            self.cors_origins = ["http://localhost:3001"]

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )


# Singleton instance - loaded once at module import
settings = Settings()
