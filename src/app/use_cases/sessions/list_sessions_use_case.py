from typing import List
from uuid import UUID

from src.app.services.clock import IClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.exceptions import UserNotFoundError
from .dtos import SessionInfo


class ListSessionsUseCase:
    """List every stored session of a user, including expired ones not yet reaped"""

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, owner_id: UUID) -> List[SessionInfo]:
        now = self.clock.now()

        async with self.uow:
            user = await self.uow.users.get_by_id(owner_id)
            if user is None:
                raise UserNotFoundError(str(owner_id))

            sessions = await self.uow.sessions.get_by_owner(owner_id)
            return [
                SessionInfo(
                    session_id=s.session_id,
                    expires_at=as_utc(s.expires_at),
                    state=s.state_at(now),
                )
                for s in sessions
            ]
