"""
Use Cases

Organized into domain folders:
- auth/: Signup, login and password reset
- salons/: Salon directory
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    PurgeExpiredResetTokensUseCase,
    SeedDefaultUserUseCase,
)
from .salons import (
    ListSalonsUseCase,
    CreateSalonUseCase,
    CreateSalonCommand,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "PurgeExpiredResetTokensUseCase",
    "SeedDefaultUserUseCase",
    # Salons
    "ListSalonsUseCase",
    "CreateSalonUseCase",
    "CreateSalonCommand",
]
