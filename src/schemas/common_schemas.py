"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint.

    Attributes:
        path: Request path that failed.
        timestamp: Epoch milliseconds, always later than the request start.
        message: Localized message.
        validation_errors: Localized message per invalid field (400 only).
    """

    path: str = Field(..., examples=["/api/1.0/users/password"])
    timestamp: int = Field(..., description="Epoch milliseconds")
    message: str = Field(..., examples=["E-mail not in use"])
    validation_errors: dict[str, str] | None = Field(
        default=None,
        serialization_alias="validationErrors",
        examples=[{"email": "E-mail is not valid"}],
    )

    model_config = ConfigDict(populate_by_name=True)
