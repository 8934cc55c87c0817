import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.errors import store_errors
from src.app.repositories.session_repository import ISessionRepository
from src.domain.base import as_utc
from src.domain.entities import User, UserSession
from src.domain.exceptions import (
    SessionIdCollisionError,
    StoreUnavailableError,
    UnknownUserError,
)

logger = logging.getLogger(__name__)


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: str) -> Optional[UserSession]:
        """Get session by session id"""
        stmt = select(UserSession).where(UserSession.session_id == session_id)
        with store_errors("session lookup"):
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_owner(self, owner_id: UUID) -> List[UserSession]:
        """Get all sessions for a user"""
        stmt = (
            select(UserSession)
            .where(UserSession.owner == owner_id)
            .order_by(UserSession.expires_at)
        )
        with store_errors("session lookup"):
            result = await self.session.exec(stmt)
            return list(result.all())

    async def create(self, session_obj: UserSession) -> UserSession:
        """
        Create a new session.

        The owner check and the foreign key both guard referential
        integrity; the primary key guards session id uniqueness.
        """
        session_id = session_obj.session_id
        owner_id = session_obj.owner

        if not await self._owner_exists(owner_id):
            logger.warning(f"Refusing session for unknown user {owner_id}")
            raise UnknownUserError(str(owner_id))

        self.session.add(session_obj)
        try:
            with store_errors("session insert"):
                await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if not await self._owner_exists(owner_id):
                logger.warning(f"Owner {owner_id} vanished before session insert")
                raise UnknownUserError(str(owner_id)) from exc
            if await self.get_by_id(session_id) is not None:
                logger.warning(f"Session id collision on {session_id[:8]}...")
                raise SessionIdCollisionError() from exc
            raise StoreUnavailableError("Session insert violated a constraint") from exc
        await self.session.refresh(session_obj)
        return session_obj

    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a specific session by session id"""
        stmt = (
            delete(UserSession)
            .where(UserSession.session_id == session_id)
            .execution_options(synchronize_session=False)
        )
        with store_errors("session delete"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0

    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete all sessions for a user"""
        stmt = (
            delete(UserSession)
            .where(UserSession.owner == owner_id)
            .execution_options(synchronize_session=False)
        )
        with store_errors("session delete"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """
        Delete every session whose expiry lies strictly before now.

        now is converted to UTC first; SQLite compares the stored UTC text,
        so an offset left on now would shift the cutoff. Naive values are UTC.
        """
        stmt = (
            delete(UserSession)
            .where(UserSession.expires_at < as_utc(now))
            .execution_options(synchronize_session=False)
        )
        with store_errors("session reap"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount

    async def _owner_exists(self, owner_id: UUID) -> bool:
        stmt = select(User.id).where(User.id == owner_id)
        with store_errors("owner lookup"):
            result = await self.session.exec(stmt)
            return result.first() is not None
