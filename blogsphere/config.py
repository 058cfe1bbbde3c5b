"""
Centralized configuration loaded from the environment (and `.env`).
"""
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Auth
    jwt_secret: str = "change-me-in-production-please-32b"
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = 24

    # Database
    database_url: str = "sqlite:///./blogsphere.db"

    # Cloudinary
    cloudinary_cloud_name: str | None = None
    cloudinary_api_key: str | None = None
    cloudinary_api_secret: str | None = None

    # Server
    env: str = "dev"
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Validation
    blog_body_min_length: int = 10

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(("sqlite://", "postgresql://", "postgresql+psycopg2://", "mysql://")):
            raise ValueError("Invalid database URL format")
        return v

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
