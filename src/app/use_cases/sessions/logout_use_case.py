import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import SessionNotFoundError, SessionOwnershipError

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Drop a session on behalf of its owner.

    Unlike RevokeSessionUseCase.execute this checks ownership first, so a
    user can only log out their own sessions.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str, owner_id: UUID) -> None:
        if not session_id:
            raise SessionNotFoundError()

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                raise SessionNotFoundError()
            if session.owner != owner_id:
                raise SessionOwnershipError(str(owner_id))

            await self.uow.sessions.delete_by_id(session_id)
            await self.uow.commit()

        logger.info(f"User {owner_id} logged out session {session_id[:8]}...")
