"""
Revoke Session Use Case

Handles explicit session deletion (logout).
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import SessionNotFoundError, UserNotFoundError
from .dtos import RevokedSessions

logger = logging.getLogger(__name__)


class RevokeSessionUseCase:
    """
    Use case for revoking sessions.

    Business Rules:
    - Revocation deletes the row, expired or not
    - Revoking the same id twice succeeds once, then fails with SessionNotFoundError
    - The owning user is never modified
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str) -> None:
        async with self.uow:
            deleted = await self.uow.sessions.delete_by_id(session_id) if session_id else False
            if not deleted:
                raise SessionNotFoundError()
            await self.uow.commit()

        logger.info(f"Revoked session {session_id[:8]}...")

    async def revoke_all(self, owner_id: UUID) -> RevokedSessions:
        """Revoke every session of an existing user"""
        async with self.uow:
            user = await self.uow.users.get_by_id(owner_id)
            if user is None:
                raise UserNotFoundError(str(owner_id))

            count = await self.uow.sessions.delete_by_owner(owner_id)
            await self.uow.commit()

        logger.info(f"Revoked {count} session(s) for {owner_id}")
        return RevokedSessions(owner=owner_id, revoked_count=count)
