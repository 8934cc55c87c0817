"""
Session Entity

Maps an opaque session id to its owner and expiry time.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import as_utc
from .enums import SessionState


class UserSession(SQLModel, table=True):
    """
    Session entity - a time-bounded proof of prior authentication.

    Business Rules:
    - session_id is generated by the token generator, never by the store
    - owner must reference an existing user when the session is created
    - Sessions are never updated; re-authentication issues a new session
    - A session past expires_at is expired but stays stored until reaped
    - Deleting a session never touches the owning user
    """

    __tablename__ = "user_sessions"

    session_id: str = Field(primary_key=True)
    expires_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    owner: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    __table_args__ = (Index("idx_user_sessions_expires_at", "expires_at"),)

    def state_at(self, now: datetime) -> SessionState:
        if now > as_utc(self.expires_at):
            return SessionState.expired
        return SessionState.active

    def is_expired_at(self, now: datetime) -> bool:
        return self.state_at(now) == SessionState.expired
