"""
Issue Session Use Case

Creates a new session for an existing user.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from src.app.services.clock import IClock
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.entities import UserSession
from src.domain.exceptions import InvalidPayloadError, SessionIdCollisionError
from .dtos import IssuedSession

logger = logging.getLogger(__name__)


class IssueSessionUseCase:
    """
    Use case for issuing a session.

    Business Rules:
    - The owner must exist (UnknownUserError, nothing persisted otherwise)
    - expires_at = now + ttl, ttl must be positive
    - A session id collision is retried with a fresh id up to max_attempts
    - Existing sessions of the owner are left alone
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: ITokenGenerator,
        clock: IClock,
        default_ttl: timedelta,
        max_attempts: int = 3,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.clock = clock
        self.default_ttl = default_ttl
        self.max_attempts = max(1, max_attempts)

    async def execute(
        self, owner_id: UUID, ttl: Optional[timedelta] = None
    ) -> IssuedSession:
        """
        Issue a session for owner_id.

        Args:
            owner_id: User the session is issued on behalf of
            ttl: Session lifetime, defaults to the configured lifetime

        Returns:
            IssuedSession with the new session id and its expiry

        Raises:
            UnknownUserError: owner does not exist
            SessionIdCollisionError: every attempt collided
        """
        ttl = ttl if ttl is not None else self.default_ttl
        if ttl <= timedelta(0):
            raise InvalidPayloadError("Session ttl must be positive")

        for attempt in range(1, self.max_attempts + 1):
            async with self.uow:
                session_id = self.token_generator.new_session_id()
                expires_at = as_utc(self.clock.now() + ttl)
                session = UserSession(
                    session_id=session_id,
                    expires_at=expires_at,
                    owner=owner_id,
                )
                try:
                    await self.uow.sessions.create(session)
                except SessionIdCollisionError:
                    if attempt == self.max_attempts:
                        raise
                    logger.warning(
                        f"Session id collision for {owner_id}, retrying "
                        f"({attempt}/{self.max_attempts})"
                    )
                    continue

                await self.uow.commit()

                logger.info(f"Issued session for {owner_id} valid until {expires_at.isoformat()}")
                return IssuedSession(
                    session_id=session_id,
                    owner=owner_id,
                    expires_at=expires_at,
                )
