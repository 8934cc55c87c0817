"""
Account Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- Commands: input to use cases (validated business intent)
- Responses: output from use cases (no password material)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class RegisterAccountCommand(BaseModel):
    """Register with a plaintext password; the use case hashes it"""

    username: str
    name: str
    surname: str
    patronymic: Optional[str] = None
    email: str
    password: str


class CreateAccountCommand(BaseModel):
    """Create an account from an already computed password hash"""

    username: str
    name: str
    surname: str
    patronymic: Optional[str] = None
    email: str
    password_hash: str


class CreatedAccount(BaseModel):
    user_id: UUID


class AccountInfo(BaseModel):
    """Stored account fields, password hash excluded"""

    id: UUID
    username: str
    name: str
    surname: str
    patronymic: Optional[str] = None
    email: str
    created_at: datetime
