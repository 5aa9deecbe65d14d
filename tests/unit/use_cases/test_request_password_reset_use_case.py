"""
Unit tests for RequestPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import datetime, timedelta
from unittest.mock import call
from uuid import uuid4

import pytest

from src.app.repositories.errors import DuplicateRecordError
from src.app.services.notification_gateway import NotificationDeliveryError
from src.app.use_cases.auth.request_password_reset_use_case import (
    GENERIC_MESSAGE,
    RequestPasswordResetUseCase,
)
from src.domain.entities import User

FROZEN_NOW = datetime(2026, 1, 15, 12, 0, 0)
FRONTEND_URL = "http://localhost:5500/"


@pytest.fixture
def user():
    return User(id=uuid4(), name="Alice", email="alice@example.com", password_hash="hash")


def make_use_case(mock_uow, mock_notifier, **kwargs):
    return RequestPasswordResetUseCase(
        mock_uow,
        mock_notifier,
        frontend_url=FRONTEND_URL,
        clock=lambda: FROZEN_NOW,
        **kwargs,
    )


@pytest.mark.asyncio
async def test_successful_password_reset_request(mock_uow, mock_notifier, user):
    """A known user gets a fresh 30-minute token and an email"""
    # Arrange
    mock_uow.users.get_by_email.return_value = user

    # Act
    result = await make_use_case(mock_uow, mock_notifier).execute(" ALICE@example.com ")

    # Assert
    assert result.is_ok()
    assert result.value.success is True
    assert "30 minutes" in result.value.message

    mock_uow.users.get_by_email.assert_called_once_with("alice@example.com")

    created_token = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert created_token.user_id == user.id
    assert created_token.expires_at == FROZEN_NOW + timedelta(minutes=30)

    # 256 bits of randomness, hex encoded
    assert len(created_token.token) == 64
    int(created_token.token, 16)

    mock_notifier.send_password_reset.assert_awaited_once_with(
        "alice@example.com",
        f"http://localhost:5500/reset-password.html?token={created_token.token}",
    )
    mock_uow.commit.assert_called_once()
    mock_uow.rollback.assert_not_called()


@pytest.mark.asyncio
async def test_previous_tokens_deleted_before_new_one_is_created(mock_uow, mock_notifier, user):
    """At most one live token per user"""
    mock_uow.users.get_by_email.return_value = user

    order = []
    mock_uow.password_reset_tokens.delete_all_by_user_id.side_effect = (
        lambda user_id: order.append("delete") or 1
    )
    mock_uow.password_reset_tokens.create.side_effect = (
        lambda token: order.append("create") or token
    )

    await make_use_case(mock_uow, mock_notifier).execute("alice@example.com")

    mock_uow.password_reset_tokens.delete_all_by_user_id.assert_called_once_with(user.id)
    assert order == ["delete", "create"]


@pytest.mark.asyncio
async def test_password_reset_non_existent_email(mock_uow, mock_notifier):
    """Unknown email: generic success, no token, no email"""
    mock_uow.users.get_by_email.return_value = None

    result = await make_use_case(mock_uow, mock_notifier).execute("nobody@example.com")

    assert result.is_ok()
    assert result.value.message == GENERIC_MESSAGE
    assert result.value.reset_token is None
    mock_uow.password_reset_tokens.delete_all_by_user_id.assert_not_called()
    mock_uow.password_reset_tokens.create.assert_not_called()
    mock_notifier.send_password_reset.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_token_committed_before_delivery(mock_uow, mock_notifier, user):
    """No transaction is held open while the provider is called"""
    mock_uow.users.get_by_email.return_value = user

    order = []
    mock_uow.commit.side_effect = lambda: order.append("commit")
    mock_notifier.send_password_reset.side_effect = lambda *args: order.append("send")

    await make_use_case(mock_uow, mock_notifier).execute("alice@example.com")

    assert order == ["commit", "send"]


@pytest.mark.asyncio
async def test_delivery_failure_withdraws_token(mock_uow, mock_notifier, user):
    """Gateway failure is DELIVERY_ERROR and the new token is deleted again"""
    mock_uow.users.get_by_email.return_value = user
    mock_notifier.send_password_reset.side_effect = NotificationDeliveryError("down")

    result = await make_use_case(mock_uow, mock_notifier).execute("alice@example.com")

    assert result.is_err()
    assert result.error.code == "DELIVERY_ERROR"
    assert result.error.message == "Unable to send reset email"

    created_token = mock_uow.password_reset_tokens.create.call_args.args[0]
    mock_uow.password_reset_tokens.delete.assert_awaited_once_with(created_token)
    assert mock_uow.commit.call_count == 2


@pytest.mark.asyncio
async def test_concurrent_issuance_loses_race(mock_uow, mock_notifier, user):
    """Another request already holds the user's token slot: generic success, no email"""
    mock_uow.users.get_by_email.return_value = user
    mock_uow.password_reset_tokens.create.side_effect = DuplicateRecordError("user_id")

    result = await make_use_case(mock_uow, mock_notifier, expose_token=True).execute(
        "alice@example.com"
    )

    assert result.is_ok()
    assert result.value.message == GENERIC_MESSAGE
    assert result.value.reset_token is None
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
    mock_notifier.send_password_reset.assert_not_called()


@pytest.mark.asyncio
async def test_unexpected_gateway_exception_propagates(mock_uow, mock_notifier, user):
    mock_uow.users.get_by_email.return_value = user
    mock_notifier.send_password_reset.side_effect = RuntimeError("bug")

    with pytest.raises(RuntimeError):
        await make_use_case(mock_uow, mock_notifier).execute("alice@example.com")

    mock_uow.password_reset_tokens.delete.assert_not_called()


@pytest.mark.asyncio
async def test_token_not_exposed_by_default(mock_uow, mock_notifier, user):
    mock_uow.users.get_by_email.return_value = user

    result = await make_use_case(mock_uow, mock_notifier).execute("alice@example.com")

    assert result.value.reset_token is None
    assert "resetToken" not in result.value.model_dump(by_alias=True, exclude_none=True)


@pytest.mark.asyncio
async def test_token_exposed_when_enabled(mock_uow, mock_notifier, user):
    mock_uow.users.get_by_email.return_value = user

    result = await make_use_case(mock_uow, mock_notifier, expose_token=True).execute(
        "alice@example.com"
    )

    created_token = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert result.value.reset_token == created_token.token
    assert result.value.model_dump(by_alias=True)["resetToken"] == created_token.token


@pytest.mark.asyncio
async def test_custom_ttl(mock_uow, mock_notifier, user):
    mock_uow.users.get_by_email.return_value = user

    result = await make_use_case(mock_uow, mock_notifier, ttl_minutes=5).execute(
        "alice@example.com"
    )

    created_token = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert created_token.expires_at == FROZEN_NOW + timedelta(minutes=5)
    assert "5 minutes" in result.value.message


@pytest.mark.asyncio
async def test_tokens_are_unique_per_request(mock_uow, mock_notifier, user):
    mock_uow.users.get_by_email.return_value = user
    use_case = make_use_case(mock_uow, mock_notifier)

    await use_case.execute("alice@example.com")
    await use_case.execute("alice@example.com")

    first, second = [c.args[0].token for c in mock_uow.password_reset_tokens.create.call_args_list]
    assert first != second
    assert mock_uow.password_reset_tokens.delete_all_by_user_id.call_args_list == [
        call(user.id),
        call(user.id),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["", "   "])
async def test_missing_email(mock_uow, mock_notifier, email):
    result = await make_use_case(mock_uow, mock_notifier).execute(email)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.message == "Email is required"
    mock_uow.users.get_by_email.assert_not_called()
