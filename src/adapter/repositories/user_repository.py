import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.errors import store_errors
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User
from src.domain.exceptions import DuplicateUsernameError, StoreUnavailableError

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        with store_errors("user lookup"):
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        with store_errors("user lookup"):
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def create(self, user: User) -> User:
        """
        Create a new user.

        The unique index on username is the only guard against duplicates,
        so two racing inserts resolve inside the database. A failed insert
        rolls back the whole unit of work.
        """
        username = user.username
        self.session.add(user)
        try:
            with store_errors("user insert"):
                await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if await self.get_by_username(username) is not None:
                logger.warning(f"Username already taken: {username}")
                raise DuplicateUsernameError(username) from exc
            raise StoreUnavailableError("User insert violated a constraint") from exc
        await self.session.refresh(user)
        return user
