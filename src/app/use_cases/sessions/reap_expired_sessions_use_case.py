import logging
from datetime import datetime
from typing import Optional

from src.app.services.clock import IClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc

logger = logging.getLogger(__name__)


class ReapExpiredSessionsUseCase:
    """
    Use case for physically deleting expired sessions.

    Runs as one bulk delete, so it can run alongside issue and validate
    without any application-level locking.
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, now: Optional[datetime] = None) -> int:
        now = as_utc(now if now is not None else self.clock.now())

        async with self.uow:
            count = await self.uow.sessions.delete_expired(now)
            if count:
                await self.uow.commit()

        if count:
            logger.info(f"Reaped {count} expired session(s)")
        else:
            logger.debug("No expired sessions to reap")
        return count
