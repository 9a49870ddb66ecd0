"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, EmailStr, Field


class LoginResponse(BaseModel):
    """Response model for a successful login."""

    account_id: str
    email: str | None = None


class LoginFailureResponse(BaseModel):
    """Response model for rejected credentials."""

    detail: str
    reason: str = Field(..., description="Authentication outcome value")
    username: str = Field(..., description="Username as submitted, for redisplay")


class VerifyEmailRequest(BaseModel):
    """Request model for email verification."""

    email: EmailStr
    token: str = Field(..., min_length=1, description="Verification token from the email")


class VerifyEmailResponse(BaseModel):
    """Response model for successful email verification."""

    message: str
    email: str


class ChangePasswordRequest(BaseModel):
    """Request model for replacing a password flagged for reset."""

    new_password: str = Field(..., min_length=8, description="New password (min 8 characters)")


class ChangePasswordResponse(BaseModel):
    """Response model for a replaced password."""

    message: str
    account_id: str


class EnvironmentResponse(BaseModel):
    """Response model for login page environment."""

    registration_base_url: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
