"""Application configuration using pydantic-settings.

Holds the static, process-wide configuration of the Ultra client: the API
base URL, fixed route suffixes and display preferences.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://ultra-api.jup.ag"


@dataclass(frozen=True)
class UltraEndpoints:
    """Fully-resolved Ultra API routes.

    Built once from settings and shared by every client.
    """

    base_url: str = DEFAULT_API_BASE_URL

    @property
    def execute(self) -> str:
        return f"{self.base_url}/execute"

    @property
    def order(self) -> str:
        return f"{self.base_url}/order"

    @property
    def routers(self) -> str:
        return f"{self.base_url}/order/routers"

    @property
    def balances(self) -> str:
        return f"{self.base_url}/balances"

    @property
    def shield(self) -> str:
        return f"{self.base_url}/shield"

    def balances_for(self, address: str) -> str:
        return f"{self.balances}/{quote(address, safe='')}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ULTRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL, description="Ultra API base URL"
    )
    api_key: Optional[str] = Field(
        default=None, description="Optional API key sent as x-api-key"
    )
    http_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None = no timeout)",
    )

    # ======================
    # Display
    # ======================
    number_grouping_separator: str = Field(
        default=",", description="Thousands separator for formatted numbers"
    )
    number_decimal_separator: str = Field(
        default=".", description="Decimal separator for formatted numbers"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def endpoints(self) -> UltraEndpoints:
        """Build the immutable route table for this configuration."""
        return UltraEndpoints(base_url=self.api_base_url.rstrip("/"))

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_base_url": self.api_base_url,
            "api_key": "***" if self.api_key else "(not set)",
            "http_timeout": self.http_timeout,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
