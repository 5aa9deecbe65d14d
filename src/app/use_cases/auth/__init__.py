"""
Authentication Use Cases

Signup, login and the password reset token lifecycle.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import SignupCommand, SignupResponse
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .purge_expired_reset_tokens_use_case import PurgeExpiredResetTokensUseCase
from .seed_default_user_use_case import SeedDefaultUserUseCase, SeedDefaultUserResponse
from .dtos import (
    MessageResponse,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
    PurgeExpiredResetTokensResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "PurgeExpiredResetTokensUseCase",
    "SeedDefaultUserUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "MessageResponse",
    "SignupResponse",
    "LoginResponse",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
    "PurgeExpiredResetTokensResponse",
    "SeedDefaultUserResponse",
]
