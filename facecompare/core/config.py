"""Configuration settings for the face comparison app."""
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    The AWS values also accept the ``EXPO_PUBLIC_*`` names used by the mobile
    build of this screen, so the same ``.env`` file can drive both.

    Attributes:
        AWS_S3_BUCKET: Bucket that holds the selfie and gallery objects
        SIMILARITY_THRESHOLD: Minimum similarity (0-100) for a face match
        SELFIE_KEY: Object key the selfie is stored under
        GALLERY_KEY: Object key the gallery image is stored under
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
    )

    # Core Settings
    PROJECT_NAME: str = "Face Compare"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    # AWS Settings
    AWS_REGION: str = Field(
        "us-east-1",
        validation_alias=AliasChoices("AWS_REGION", "EXPO_PUBLIC_AWS_REGION"),
    )
    AWS_ACCESS_KEY_ID: str = Field(
        "",
        validation_alias=AliasChoices("AWS_ACCESS_KEY_ID", "EXPO_PUBLIC_AWS_ACCESS_KEY"),
    )
    AWS_SECRET_ACCESS_KEY: str = Field(
        "",
        validation_alias=AliasChoices("AWS_SECRET_ACCESS_KEY", "EXPO_PUBLIC_AWS_SECRET_ACCESS_KEY"),
    )
    AWS_S3_BUCKET: str = Field(
        "",
        validation_alias=AliasChoices("AWS_S3_BUCKET", "EXPO_PUBLIC_AWS_BUCKET_NAME"),
    )

    # Upload Settings
    SELFIE_KEY: str = "selfie.jpg"
    GALLERY_KEY: str = "gallery.jpg"
    UPLOAD_CONTENT_TYPE: str = "image/jpeg"
    HANDLE_FETCH_TIMEOUT: float = 30.0  # seconds, only for http(s) handles

    # Face comparison settings
    SIMILARITY_THRESHOLD: float = Field(90.0, ge=0.0, le=100.0)

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process.

    Returns:
        Settings: The cached settings instance
    """
    return Settings()
