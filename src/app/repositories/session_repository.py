from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import UserSession


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[UserSession]:
        """Get session by session id, expired or not"""
        pass

    @abstractmethod
    async def get_by_owner(self, owner_id: UUID) -> List[UserSession]:
        """Get all stored sessions for a user"""
        pass

    @abstractmethod
    async def create(self, session: UserSession) -> UserSession:
        """
        Create a new session.

        Raises UnknownUserError if the owner does not exist and
        SessionIdCollisionError if the session id is already stored.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete all sessions for a user. Returns count of deleted sessions."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete all sessions with expires_at < now. Returns count of deleted sessions."""
        pass
