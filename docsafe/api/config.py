"""HTTP server configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()

DEFAULT_MAX_UPLOAD_MB = 20


class ApiConfig(BaseModel):
    """Configuration for the FastAPI application.

    Attributes:
        allowed_origins: Origins allowed by CORS. Empty allows any origin.
        max_upload_size: Maximum accepted upload size in bytes.
    """

    model_config = ConfigDict(validate_default=True)

    allowed_origins: list[str] = Field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", ""),
        description="Comma-separated CORS origin allowlist",
    )
    max_upload_size: int = Field(
        default_factory=lambda: int(
            float(os.getenv("MAX_UPLOAD_MB", str(DEFAULT_MAX_UPLOAD_MB))) * 1024 * 1024
        ),
        ge=1,
        description="Maximum upload size in bytes",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string and drop blank entries."""
        if isinstance(v, str):
            v = v.split(",")
        return [origin.strip() for origin in v if origin.strip()]


def get_api_config() -> ApiConfig:
    """Create server configuration from environment.

    Returns:
        Configured ApiConfig instance.
    """
    return ApiConfig()
