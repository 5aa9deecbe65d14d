"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- SignupResponse: Output from use case (structured result)
"""

from pydantic import BaseModel

from .dtos import MessageResponse


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    Created by API layer after request parsing passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    name: str
    email: str
    password: str
    confirm_password: str


class SignupResponse(MessageResponse):
    """Signup response - no sensitive data is echoed back"""
