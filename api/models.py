"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator

from core.config import (
    ALLOWED_PASSWORD_LENGTHS,
    DEFAULT_PASSWORD_LENGTH,
    MAX_SUBMITTED_PASSWORD_LENGTH,
)


def normalize_length(length: Any) -> int:
    """Map a requested replacement length onto an allowed length.

    Any value outside ALLOWED_PASSWORD_LENGTHS (including non-numbers and
    booleans) falls back to DEFAULT_PASSWORD_LENGTH instead of failing.
    """
    if isinstance(length, bool) or not isinstance(length, (int, float)):
        return DEFAULT_PASSWORD_LENGTH
    if length in ALLOWED_PASSWORD_LENGTHS:
        return int(length)
    return DEFAULT_PASSWORD_LENGTH


class PasswordCheckRequest(BaseModel):
    """Request model for password check."""
    password: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_SUBMITTED_PASSWORD_LENGTH,
        description="Password to check"
    )
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        description="Length of the suggested replacement (12, 16 or 20)"
    )

    @field_validator('length', mode='before')
    @classmethod
    def validate_length_field(cls, v: Any) -> int:
        """Fall back to the default length for unsupported values."""
        return normalize_length(v)


class StrengthFeedback(BaseModel):
    """zxcvbn feedback for the submitted password."""
    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)


class PasswordCheckResponse(BaseModel):
    """Response model for password check.

    suggested_password is null only when the submitted password already
    has the maximum strength score and was not found in breaches.
    """
    pwned: bool
    pwned_count: int = Field(ge=0)
    strength_score: int = Field(ge=0, le=4)
    strength_feedback: StrengthFeedback
    suggested_password: Optional[str] = None
    suggested_password_score: int = Field(default=0, ge=0, le=4)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
