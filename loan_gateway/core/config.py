"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file. The database URL, token-signing secret and
    AI API key have no defaults: the service refuses to start
    without them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "loan-gateway"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Authentication
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = Field(default=60, gt=0)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Generative AI
    google_ai_api_key: str = Field(..., min_length=1)
    ai_model: str = "gemini-1.5-flash"
    ai_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    ai_request_timeout: float = 60.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
