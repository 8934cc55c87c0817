"""
End-to-end register, login, validate and reap against SQLite
"""

from contextlib import asynccontextmanager
from datetime import timedelta

import pytest

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.token_generator import SecureTokenGenerator
from src.app.services.session_reaper import SessionReaper
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.accounts import RegisterAccountCommand, RegisterAccountUseCase
from src.app.use_cases.sessions import (
    IssueSessionUseCase,
    LoginCommand,
    LoginUseCase,
    ValidateSessionUseCase,
)
from src.domain.exceptions import AuthenticationFailedError, SessionNotFoundError
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def login(uow, clock, hasher):
    issue = IssueSessionUseCase(
        uow,
        token_generator=SecureTokenGenerator(),
        clock=clock,
        default_ttl=timedelta(days=2),
    )
    return LoginUseCase(uow, hasher, issue)


@pytest.mark.asyncio
async def test_register_login_validate(uow, clock, hasher, login):
    payload = TestDataLoader.user("alice")
    created = await RegisterAccountUseCase(uow, hasher, clock).execute(
        RegisterAccountCommand(**payload)
    )

    first = await login.execute(
        LoginCommand(username="alice", password=payload["password"])
    )
    second = await login.execute(
        LoginCommand(user_id=created.user_id, password=payload["password"])
    )

    assert first.session_id != second.session_id
    assert len(first.session_id) == 64

    validated = await ValidateSessionUseCase(uow, clock).execute(first.session_id)
    assert validated.owner == created.user_id


@pytest.mark.asyncio
async def test_login_wrong_password_issues_nothing(uow, clock, hasher, login):
    payload = TestDataLoader.user("bob")
    created = await RegisterAccountUseCase(uow, hasher, clock).execute(
        RegisterAccountCommand(**payload)
    )

    with pytest.raises(AuthenticationFailedError):
        await login.execute(LoginCommand(username="bob", password="not-it"))

    async with uow:
        assert await uow.sessions.get_by_owner(created.user_id) == []


@pytest.mark.asyncio
async def test_reaper_pass(session_factory, uow, clock, hasher, login):
    payload = TestDataLoader.user("alice")
    await RegisterAccountUseCase(uow, hasher, clock).execute(
        RegisterAccountCommand(**payload)
    )
    issued = await login.execute(
        LoginCommand(username="alice", password=payload["password"], ttl=timedelta(minutes=5))
    )

    @asynccontextmanager
    async def uow_factory():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    reaper = SessionReaper(uow_factory, clock=clock, interval_seconds=60)
    assert await reaper.run_once() == 0

    clock.advance(timedelta(minutes=10))
    assert await reaper.run_once() == 1

    with pytest.raises(SessionNotFoundError):
        await ValidateSessionUseCase(uow, clock).execute(issued.session_id)

