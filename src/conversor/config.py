"""
Conversor Configuration Management

Settings are read from environment variables or a local .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === Rate Source Configuration ===
    rates_endpoint_url: str = Field(
        default="https://api.fxratesapi.com/latest",
        description="Endpoint returning the latest base-relative rate table"
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        description="HTTP timeout for the rate fetch; unset waits indefinitely"
    )

    # === API Configuration ===
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
