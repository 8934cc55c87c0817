"""
Session Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the session domain.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import SessionState


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """
    Login command - identifies the account by username or id.

    ttl overrides the configured session lifetime when given.
    """

    password: str
    username: Optional[str] = None
    user_id: Optional[UUID] = None
    ttl: Optional[timedelta] = None


# ============================================================================
# Response DTOs
# ============================================================================


class IssuedSession(BaseModel):
    """A freshly issued session"""

    session_id: str
    owner: UUID
    expires_at: datetime


class ValidatedSession(BaseModel):
    """Result of validating an active session"""

    owner: UUID
    valid_until: datetime


class SessionInfo(BaseModel):
    """A stored session and its state at the time of listing"""

    session_id: str
    expires_at: datetime
    state: SessionState


class RevokedSessions(BaseModel):
    owner: UUID
    revoked_count: int
