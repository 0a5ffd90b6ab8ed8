"""Centralised configuration for the hotel search endpoint."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, HttpUrl, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Environment-driven settings for the hotel search Lambda."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hotel_api_endpoint: HttpUrl = Field(
        "https://staging.trektoo.com/api/hotel/search",
        description="Upstream hotel search endpoint queried with location_id.",
    )
    api_username: SecretStr | None = Field(
        default=None,
        description="Basic auth username for the upstream hotel API.",
    )
    api_password: SecretStr | None = Field(
        default=None,
        description="Basic auth password for the upstream hotel API.",
    )
    hotel_api_timeout: float = Field(10.0, gt=0.0)
    hotel_api_cache_ttl: int = Field(
        3600,
        ge=0,
        description="Seconds to reuse an upstream payload; 0 disables the cache.",
    )
    hotel_api_forward_stay_params: bool = Field(
        False,
        description="Also send checkin/checkout/adults/children upstream.",
    )
    log_level: str = Field("INFO")

    @model_validator(mode="after")
    def warn_missing_credentials(self) -> Settings:
        if self.api_username is None or self.api_password is None:
            logger.warning(
                "API_USERNAME or API_PASSWORD is not set; upstream calls will be rejected"
            )
        return self

    @property
    def credentials(self) -> tuple[str, str]:
        username = self.api_username.get_secret_value() if self.api_username else ""
        password = self.api_password.get_secret_value() if self.api_password else ""
        return username, password


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
