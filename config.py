"""Configuration management for URL shortener."""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: Optional[str] = Field(
        default=None,
        description="Base URL for generating short URLs (defaults to http://localhost:<port>)"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    top_domains_limit: int = Field(
        default=3,
        ge=0,
        description="Number of domains reported by the metrics endpoint by default"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an absolute http(s) URL when a base URL is given."""
        if v is None or v == "":
            return None
        parsed = urlsplit(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"invalid BASE_URL: {v!r}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_base_url(self) -> "Config":
        """Derive the base URL from the port when none is configured."""
        if self.base_url is None:
            self.base_url = f"http://localhost:{self.port}"
        return self


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
