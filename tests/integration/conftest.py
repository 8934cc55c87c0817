import pytest
import pytest_asyncio
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.accounts import CreateAccountCommand, CreateAccountUseCase
from src.depends import build_engine, init_models
from tests.fixtures.fakes import NOW, FixedClock
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow(db_session):
    return SqlAlchemyUnitOfWork(db_session)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest_asyncio.fixture
async def alice(uow, clock):
    payload = TestDataLoader.user("alice")
    payload["password_hash"] = "opaque-hash"
    del payload["password"]
    created = await CreateAccountUseCase(uow, clock).execute(
        CreateAccountCommand(**payload)
    )
    return created.user_id
