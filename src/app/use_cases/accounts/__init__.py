"""
Account Use Cases

Account creation and lookup.
"""

from .create_account_use_case import CreateAccountUseCase
from .register_account_use_case import RegisterAccountUseCase
from .find_account_use_case import FindAccountUseCase
from .dtos import (
    AccountInfo,
    CreateAccountCommand,
    CreatedAccount,
    RegisterAccountCommand,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "RegisterAccountUseCase",
    "FindAccountUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "RegisterAccountCommand",
    # DTOs - Responses
    "CreatedAccount",
    "AccountInfo",
]
