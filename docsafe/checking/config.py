"""Checking service configuration with environment variable loading.

Pydantic-based configuration for the grammar-check client.
Works with the public LanguageTool API or any compatible server/proxy.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://api.languagetool.org/v2/check"
DEFAULT_CHUNK_SIZE = 20_000


class CheckerConfig(BaseModel):
    """Configuration for the grammar-check client.

    Attributes:
        api_url: Check endpoint of the LanguageTool-compatible service.
        api_key: Optional credential for paid plans or proxies.
        timeout_seconds: Timeout applied to each request.
        chunk_size: Maximum number of characters sent per request.
    """

    model_config = ConfigDict(validate_default=True)

    api_url: str = Field(
        default_factory=lambda: os.getenv("LT_API_URL") or DEFAULT_API_URL,
        description="Checking service endpoint",
    )
    api_key: str | None = Field(
        default_factory=lambda: os.getenv("LT_API_KEY") or None,
        description="Optional checking service credential",
    )
    timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("LT_TIMEOUT_SECONDS", "30")),
        gt=0.0,
        le=300.0,
        description="Per-request timeout in seconds",
    )
    chunk_size: int = Field(
        default_factory=lambda: int(os.getenv("LT_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))),
        ge=1,
        description="Maximum characters per checking request",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that the endpoint is an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("LT_API_URL must be an http(s) URL")
        return v

    @field_validator("api_key")
    @classmethod
    def blank_api_key_is_none(cls, v: str | None) -> str | None:
        """Treat a blank credential as absent."""
        if v is None or not v.strip():
            return None
        return v.strip()


def get_checker_config() -> CheckerConfig:
    """Create checking service configuration from environment.

    Returns:
        Configured CheckerConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return CheckerConfig()
