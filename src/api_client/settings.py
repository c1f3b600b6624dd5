"""Application-wide configuration management using Pydantic settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration for the API client."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_base_url: str = Field(..., alias="API_BASE_URL")
    api_key: Optional[str] = Field(None, alias="API_KEY")
    api_timeout_seconds: float = Field(10.0, alias="API_TIMEOUT_SECONDS")
    person_endpoint: str = Field("/people", alias="PERSON_ENDPOINT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("api_base_url", "person_endpoint")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty ``API_KEY`` in the environment as not configured."""

        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance loaded from environment variables."""

    return Settings()
