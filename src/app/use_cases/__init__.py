"""
Use Cases

Organized into domain folders:
- accounts/: Account creation and lookup
- sessions/: Session issuing, validation, revocation and reaping
"""

from .accounts import (
    CreateAccountUseCase,
    RegisterAccountUseCase,
    FindAccountUseCase,
)
from .sessions import (
    IssueSessionUseCase,
    ValidateSessionUseCase,
    RevokeSessionUseCase,
    ReapExpiredSessionsUseCase,
    LoginUseCase,
    LogoutUseCase,
    ListSessionsUseCase,
)

__all__ = [
    # Accounts
    "CreateAccountUseCase",
    "RegisterAccountUseCase",
    "FindAccountUseCase",
    # Sessions
    "IssueSessionUseCase",
    "ValidateSessionUseCase",
    "RevokeSessionUseCase",
    "ReapExpiredSessionsUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ListSessionsUseCase",
]
