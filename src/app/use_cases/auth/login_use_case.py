"""
Login Use Case

Handles user authentication and returns a signed credential.
"""

from src.libs.result import Error, Result, Return
from src.app.services.passwords import burn_verification_time, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.api.utils.jwt import generate_jwt
from .dtos import LoginResponse

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A throwaway bcrypt check runs when the user is unknown
    - The returned token is a signed JWT; no endpoint requires it yet
    """

    def __init__(self, uow: UnitOfWork, jwt_secret: str, jwt_expire_minutes: int = 60):
        self.uow = uow
        self.jwt_secret = jwt_secret
        self.jwt_expire_minutes = jwt_expire_minutes

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email (any case, may carry whitespace)
            password: Plain text password

        Returns:
            Result with LoginResponse, or Error
        """
        if not email or not email.strip() or not password:
            return Return.err(Error("VALIDATION_ERROR", "Email and password are required"))

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

        if user is None:
            burn_verification_time(password)
            return Return.err(INVALID_CREDENTIALS)

        if not verify_password(password, user.password_hash):
            return Return.err(INVALID_CREDENTIALS)

        token = generate_jwt(
            user.id, user.email, self.jwt_secret, expires_minutes=self.jwt_expire_minutes
        )
        return Return.ok(LoginResponse(message="Login successful", token=token))
