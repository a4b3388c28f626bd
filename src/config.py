"""
Configuration management for the morTodo service and client.

This module handles all application settings loaded from environment variables,
providing type-safe configuration with validation and defaults.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- Separate sections for storage, client, application and server concerns
- Validators reject unsafe or unknown values at startup
- Properties for computed values (is_production, is_development)
"""

from typing import Union

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: STORE_BACKEND=mongo MONGO_URI=mongodb://db:27017 python run.py

    Configuration sections:
    1. Storage - which document store backs the API and how to reach it
    2. Client - where the client state controller finds the API
    3. Application - Runtime behavior configuration
    4. Server - HTTP server configuration
    5. Security - CORS settings
    """

    # ===== Storage Configuration =====
    store_backend: str = Field(
        default="sqlite",
        pattern="^(sqlite|mongo)$",
        description="Storage collaborator backing the API (sqlite or mongo)"
    )
    database_url: str = Field(
        default="sqlite:///./todos.db",
        description="SQLAlchemy URL used when store_backend is sqlite"
    )
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string used when store_backend is mongo"
    )
    mongo_database: str = Field(
        default="todo_list_db",
        description="MongoDB database name"
    )
    mongo_collection: str = Field(
        default="todos",
        description="MongoDB collection holding todo documents"
    )

    # ===== Client Configuration =====
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL the client uses to reach the todo API"
    )
    client_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout in seconds for client calls"
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
        default="console",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind host"
    )
    server_port: int = Field(
        default=5000,
        ge=1024, le=65535,
        description="Server port"
    )

    # ===== Security Configuration =====
    cors_origins: Union[str, list[str]] = Field(
        default="",
        description="Allowed CORS origins - comma-separated string or list"
    )

    @model_validator(mode="after")
    def validate_and_parse_settings(self):
        """Parse cors_origins from string to list and validate."""
        cors_value = self.cors_origins
        if isinstance(cors_value, str):
            if not cors_value or cors_value.strip() == "":
                self.cors_origins = []
            else:
                self.cors_origins = [origin.strip() for origin in cors_value.split(",") if origin.strip()]

        if self.app_env == "production":
            if not self.cors_origins:
                raise ValueError("CORS origins must be configured in production")
            if "*" in self.cors_origins:
                raise ValueError("CORS wildcard not allowed in production")

        # The browser frontend is served from another origin during development
        if not self.cors_origins:
            self.cors_origins = ["*"]

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def uses_mongo(self) -> bool:
        return self.store_backend == "mongo"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )


# Singleton instance - loaded once at module import
settings = Settings()
