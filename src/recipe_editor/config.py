from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    RECIPE_API_BASE_URL: str = "http://localhost:5000/api"
    RECIPE_API_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0)
    SUCCESS_ACK_SECONDS: float = Field(default=2.0, ge=0)
    DEFAULT_PRODUCT_QUANTITY: int = Field(default=100, ge=0)
    LISTING_ROUTE: str = "/"
    LOG_LEVEL: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    return settings
