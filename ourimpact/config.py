"""
Application configuration using Pydantic settings.

This module contains all configuration settings for the application,
loaded from environment variables with sensible defaults.
"""

import os
import secrets
from typing import List, Optional, Union

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden with environment variables or a .env file.
    """

    # API Configuration
    PROJECT_NAME: str = "Our Impact API"
    API_PREFIX: str = ""
    SECRET_KEY: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        description="Secret key for JWT signing. MUST be set via SECRET_KEY in production!"
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    DEBUG: bool = False

    # CORS Configuration
    # Note: Using Union[str, List] to avoid pydantic-settings JSON parsing issues
    BACKEND_CORS_ORIGINS: Union[str, List[str]] = "*"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(
        cls, v: Union[str, List[str]]
    ) -> List[str]:
        """
        Parse CORS origins from environment variable.

        Supports a comma-separated string, an already parsed list,
        or an empty string (no CORS).
        """
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS origins format: {v}")

    # Database Configuration
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "our_impact"
    POSTGRES_PASSWORD: str = "our_impact"
    POSTGRES_DB: str = "our_impact_db"
    POSTGRES_PORT: int = 5432

    SQLALCHEMY_DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Assemble database connection string from individual components."""
        if isinstance(v, str) and v:
            return v

        # DATABASE_URL (Render/Railway/Heroku style)
        database_url = os.getenv("DATABASE_URL")
        if database_url:
            if database_url.startswith("postgres://"):
                database_url = database_url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif database_url.startswith("postgresql://"):
                database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return database_url

        values = info.data
        db_name = values.get("POSTGRES_DB")

        if db_name and db_name.endswith(".db"):
            return f"sqlite+aiosqlite:///{db_name}"

        return (
            f"postgresql+asyncpg://{values.get('POSTGRES_USER')}:"
            f"{values.get('POSTGRES_PASSWORD')}@"
            f"{values.get('POSTGRES_SERVER')}:"
            f"{values.get('POSTGRES_PORT')}/"
            f"{db_name}"
        )

    # Password hashing
    BCRYPT_WORK_FACTOR: int = Field(default=13, ge=4, le=31)

    # OpenWeather (scheduled weather/air-quality job)
    OPENWEATHER_API_KEY: Optional[str] = None
    OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org/data/2.5"
    WEATHER_JOB_ENABLED: bool = True
    WEATHER_JOB_HOUR: int = Field(default=12, ge=0, le=23)
    WEATHER_JOB_MINUTE: int = Field(default=30, ge=0, le=59)
    WEATHER_JOB_TIMEZONE: str = "America/Ojinaga"
    WEATHER_REQUEST_TIMEOUT: float = 10.0

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"
    REGISTER_RATE_LIMIT: str = "5/minute"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    @property
    def secret_key_generated(self) -> bool:
        """True when SECRET_KEY came from neither the environment nor .env."""
        return "SECRET_KEY" not in self.model_fields_set

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()
