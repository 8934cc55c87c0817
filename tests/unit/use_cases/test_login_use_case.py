"""
Unit tests for Login Use Case
"""

from datetime import timedelta

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from src.app.use_cases.sessions import IssuedSession, LoginCommand, LoginUseCase
from src.domain.entities import User
from src.domain.exceptions import (
    AuthenticationFailedError,
    InvalidPayloadError,
    MissingCredentialsError,
    UserNotFoundError,
)
from tests.fixtures.fakes import NOW, PlainPasswordHasher


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        username="alice",
        name="Alice",
        surname="Ivanova",
        email="alice@example.com",
        password_hash="plain$secret",
    )


@pytest.fixture
def issue_session():
    issue = AsyncMock()
    issue.execute = AsyncMock(
        side_effect=lambda owner_id, ttl=None: IssuedSession(
            session_id="ssid-1", owner=owner_id, expires_at=NOW + timedelta(days=2)
        )
    )
    return issue


@pytest.mark.asyncio
async def test_login_by_username(mock_uow, user, issue_session):
    mock_uow.users.get_by_username.return_value = user

    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    result = await use_case.execute(LoginCommand(username="alice", password="secret"))

    assert result.owner == user.id
    assert result.session_id == "ssid-1"
    issue_session.execute.assert_called_once_with(user.id, None)


@pytest.mark.asyncio
async def test_login_by_user_id_with_ttl(mock_uow, user, issue_session):
    mock_uow.users.get_by_id.return_value = user
    ttl = timedelta(hours=1)

    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    await use_case.execute(LoginCommand(user_id=user.id, password="secret", ttl=ttl))

    mock_uow.users.get_by_id.assert_called_once_with(user.id)
    issue_session.execute.assert_called_once_with(user.id, ttl)


@pytest.mark.asyncio
async def test_login_always_issues_new_session(mock_uow, user, issue_session):
    """Re-authentication never reuses an existing session"""
    mock_uow.users.get_by_username.return_value = user

    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    await use_case.execute(LoginCommand(username="alice", password="secret"))
    await use_case.execute(LoginCommand(username="alice", password="secret"))

    assert issue_session.execute.call_count == 2
    mock_uow.sessions.get_by_owner.assert_not_called()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, user, issue_session):
    mock_uow.users.get_by_username.return_value = user

    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    with pytest.raises(AuthenticationFailedError) as exc_info:
        await use_case.execute(LoginCommand(username="alice", password="wrong"))

    assert exc_info.value.code == "INVALID_CREDENTIALS"
    issue_session.execute.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_user(mock_uow, issue_session):
    mock_uow.users.get_by_username.return_value = None

    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    with pytest.raises(UserNotFoundError):
        await use_case.execute(LoginCommand(username="nobody", password="secret"))

    issue_session.execute.assert_not_called()


@pytest.mark.asyncio
async def test_login_empty_password(mock_uow, issue_session):
    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    with pytest.raises(MissingCredentialsError):
        await use_case.execute(LoginCommand(username="alice", password=""))

    mock_uow.users.get_by_username.assert_not_called()


@pytest.mark.asyncio
async def test_login_without_identifier(mock_uow, issue_session):
    use_case = LoginUseCase(mock_uow, PlainPasswordHasher(), issue_session)
    with pytest.raises(InvalidPayloadError):
        await use_case.execute(LoginCommand(password="secret"))
