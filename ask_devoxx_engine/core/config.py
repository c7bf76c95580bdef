"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INQUIRY_ENDPOINT = "https://askdevoxx.cfapps.io/inquiry"
DEFAULT_CARD_IMAGE_URL = (
    "https://encrypted-tbn0.gstatic.com/images"
    "?q=tbn:ANd9GcS2EJZCArvYTVTThseT3TdN25cmPRanxrM2RDAgOI1GT0GEQLMVLA"
)


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    INQUIRY_ENDPOINT: str = Field(default=DEFAULT_INQUIRY_ENDPOINT)
    CARD_IMAGE_URL: str = Field(default=DEFAULT_CARD_IMAGE_URL)
    # Upper bound for the blocking inquiry call; expiry is treated like any network failure
    INQUIRY_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    ASK_DEVOXX_LOG_LEVEL: str = Field(default="info")
    ASK_DEVOXX_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("/data"))

    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=False)


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config", "DEFAULT_INQUIRY_ENDPOINT", "DEFAULT_CARD_IMAGE_URL"]
