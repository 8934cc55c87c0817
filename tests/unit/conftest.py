import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.fixtures.fakes import NOW, FixedClock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_username = AsyncMock()
    uow.users.create = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock()
    uow.sessions.get_by_owner = AsyncMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.delete_by_id = AsyncMock()
    uow.sessions.delete_by_owner = AsyncMock()
    uow.sessions.delete_expired = AsyncMock()
    return uow


@pytest.fixture
def clock():
    return FixedClock(NOW)
