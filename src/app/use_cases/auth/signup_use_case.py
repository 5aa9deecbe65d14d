import logging

from src.libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateRecordError
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.entities import User
from .signup_dto import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand
    - Output: Result[SignupResponse]

    Business Logic:
    1. Reject empty fields and mismatched password confirmation
    2. Normalize email and reject duplicates
    3. Hash password with bcrypt cost factor 10
    4. Create User and commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Returns:
            Result[SignupResponse]
            or Error(VALIDATION_ERROR) for bad input
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        # Passwords are taken verbatim; only name and email are trimmed
        if not command.name.strip() or not command.email.strip():
            return Return.err(Error("VALIDATION_ERROR", "All fields are required"))
        if not command.password or not command.confirm_password:
            return Return.err(Error("VALIDATION_ERROR", "All fields are required"))

        if command.password != command.confirm_password:
            return Return.err(Error("VALIDATION_ERROR", "Passwords do not match"))

        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already registered"))

            user = User(
                name=command.name.strip(),
                email=email,
                password_hash=hash_password(command.password),
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateRecordError:
                # Lost a race with a concurrent signup for the same email
                await self.uow.rollback()
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already registered"))

            logger.info("User signed up: %s", user.id)
            return Return.ok(SignupResponse(message="Sign up successful"))
