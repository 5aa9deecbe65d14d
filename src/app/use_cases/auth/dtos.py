"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Plain success response: signup, reset confirmation"""

    success: bool = True
    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    success: bool = True
    message: str
    token: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    # Only populated when EXPOSE_RESET_TOKEN is enabled (development)
    reset_token: Optional[str] = Field(default=None, serialization_alias="resetToken")


class ConfirmPasswordResetResponse(MessageResponse):
    """Response for confirm password reset use case"""


class PurgeExpiredResetTokensResponse(BaseModel):
    """Response for the expired token sweep"""

    deleted: int
