from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured error payload returned under ``detail``.

    Attributes:
        error: Human-readable category (e.g. "Processing failed").
        code: Machine-readable category.
        message: Underlying reason, when there is one worth exposing.
    """

    error: str
    code: str
    message: str | None = None


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service identifier")
