"""
Salon Directory Domain Entities

Each entity in its own file.
"""

from .user import User
from .password_reset_token import PasswordResetToken
from .salon import Salon, MIN_RATING, MAX_RATING

__all__ = [
    "User",
    "PasswordResetToken",
    "Salon",
    "MIN_RATING",
    "MAX_RATING",
]
