"""
Session Use Cases

Issuing, validating, revoking and reaping sessions.
"""

from .issue_session_use_case import IssueSessionUseCase
from .validate_session_use_case import ValidateSessionUseCase
from .revoke_session_use_case import RevokeSessionUseCase
from .reap_expired_sessions_use_case import ReapExpiredSessionsUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .list_sessions_use_case import ListSessionsUseCase
from .dtos import (
    IssuedSession,
    LoginCommand,
    RevokedSessions,
    SessionInfo,
    ValidatedSession,
)

__all__ = [
    # Use Cases
    "IssueSessionUseCase",
    "ValidateSessionUseCase",
    "RevokeSessionUseCase",
    "ReapExpiredSessionsUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ListSessionsUseCase",
    # DTOs - Commands
    "LoginCommand",
    # DTOs - Responses
    "IssuedSession",
    "ValidatedSession",
    "SessionInfo",
    "RevokedSessions",
]
