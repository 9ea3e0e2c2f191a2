"""API response models."""

from pydantic import BaseModel, Field
from typing import Any, Optional, Literal


class ErrorResponse(BaseModel):
    """Error body returned to API clients."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    request_id: str = ""
    user_id: str = ""


class HTTPError(BaseModel):
    """A domain error translated to an HTTP status."""

    code: int
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorCodeInfo(BaseModel):
    """One row of the error code table."""

    code: str
    category: str
    http_status: int


class FormValidationResponse(BaseModel):
    """Result of validating a form definition."""

    valid: bool = True
    dialect: str
    message: str = "form is valid"


class SubmissionValidationResponse(BaseModel):
    """Result of validating a form submission."""

    valid: bool = True
    form_id: str
    status: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
