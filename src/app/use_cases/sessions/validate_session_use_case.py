from src.app.services.clock import IClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.exceptions import SessionExpiredError, SessionNotFoundError
from .dtos import ValidatedSession


class ValidateSessionUseCase:
    """
    Use case for checking a session id.

    Expired and never-issued sessions fail with different errors so
    callers can tell "lapsed" from "unknown". Validation never deletes.
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, session_id: str) -> ValidatedSession:
        if not session_id:
            raise SessionNotFoundError()

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                raise SessionNotFoundError()

            expires_at = as_utc(session.expires_at)
            if session.is_expired_at(self.clock.now()):
                raise SessionExpiredError(expires_at.isoformat())

            return ValidatedSession(owner=session.owner, valid_until=expires_at)
