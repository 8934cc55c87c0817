from contextlib import asynccontextmanager
from datetime import timedelta

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.clock import SystemClock
from src.adapter.services.token_generator import SecureTokenGenerator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import RegisterAccountUseCase
from src.app.use_cases.sessions import IssueSessionUseCase, LoginUseCase


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(db_uri: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign key enforcement"""
    engine = create_async_engine(db_uri, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


async def init_models(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


engine = build_engine(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

clock = SystemClock()
token_generator = SecureTokenGenerator()
password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@asynccontextmanager
async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_issue_session_use_case(uow: UnitOfWork) -> IssueSessionUseCase:
    return IssueSessionUseCase(
        uow,
        token_generator=token_generator,
        clock=clock,
        default_ttl=timedelta(seconds=ApplicationConfig.SESSION_TTL_SECONDS),
        max_attempts=ApplicationConfig.SESSION_ID_MAX_ATTEMPTS,
    )


def get_login_use_case(uow: UnitOfWork) -> LoginUseCase:
    return LoginUseCase(uow, password_hasher, get_issue_session_use_case(uow))


def get_register_account_use_case(uow: UnitOfWork) -> RegisterAccountUseCase:
    return RegisterAccountUseCase(uow, password_hasher, clock)
