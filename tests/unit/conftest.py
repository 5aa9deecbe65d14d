import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_by_token = AsyncMock()
    uow.password_reset_tokens.delete = AsyncMock()
    uow.password_reset_tokens.delete_all_by_user_id = AsyncMock(return_value=0)
    uow.password_reset_tokens.delete_expired = AsyncMock(return_value=0)

    uow.salons = MagicMock()
    uow.salons.create = AsyncMock(side_effect=lambda salon: salon)
    uow.salons.list_newest_first = AsyncMock(return_value=[])
    return uow


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.send_password_reset = AsyncMock()
    return notifier
