from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError
from src.app.services.notification_gateway import NotificationGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_config, get_notification_gateway, get_unit_of_work
from src.libs.result import Error

router = APIRouter(tags=["Authentication"])

# Error code -> HTTP status for every client-facing auth error
CLIENT_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_400_BAD_REQUEST,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error):
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    if error.code == "DELIVERY_ERROR":
        raise ServerError(error, public_message=error.message)
    raise ServerError(error)


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    confirm_password: str = Field(
        ..., alias="confirmPassword", description="Must equal password"
    )

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


@router.post("/signup", status_code=status.HTTP_200_OK, response_model=SignupResponse)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Raises:
        - 400 Bad Request: Missing fields or password mismatch
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        confirm_password=request.confirm_password,
    )

    result = await SignupUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Login

    Raises:
        - 400 Bad Request: Email or password missing
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, config.JWT_SECRET, config.JWT_EXPIRE_MINUTES)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: str = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationGateway = Depends(get_notification_gateway),
    config=Depends(get_config),
):
    """
    Request Password Reset

    Security:
        - No email enumeration (same response for unknown emails)
        - Token is 32 random bytes, valid for 30 minutes
        - The token is only echoed back when EXPOSE_RESET_TOKEN is enabled

    Returns:
        - 200 OK: Reset link sent, or email unknown
        - 400 Bad Request: Email missing
        - 500 Internal Server Error: Email could not be delivered
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        notifier,
        frontend_url=config.FRONTEND_URL,
        ttl_minutes=config.RESET_TOKEN_TTL_MINUTES,
        expose_token=config.EXPOSE_RESET_TOKEN,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., description="Password reset token from email")
    password: str = Field(..., description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Missing fields, invalid or expired token
        - 404 Not Found: Token belongs to a user that no longer exists
        - 500 Internal Server Error: Server error
    """
    result = await ConfirmPasswordResetUseCase(uow).execute(request.token, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
