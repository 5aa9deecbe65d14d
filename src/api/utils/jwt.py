from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt


def generate_jwt(user_id: UUID, email: str, secret: str, expires_minutes: int = 60) -> str:
    """
    Generate the login credential

    Args:
        user_id: User UUID
        email: Normalized user email
        secret: HS256 signing secret
        expires_minutes: Lifetime of the token

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "exp": now + timedelta(minutes=expires_minutes),
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def verify_jwt(token: str, secret: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        return jwt.decode(token, secret, algorithms=["HS256"])
    except JWTError:
        return None
