"""
User Entity

Represents an account that sessions can be issued against.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - an account with a unique, immutable username.

    Business Rules:
    - id is generated once (UUID4) and never reused
    - username is unique across all users (enforced by the unique index)
    - patronymic is optional; absent values are stored as NULL
    - password_hash is produced by the password hasher and never interpreted here
    - created_at is set once at creation and never mutated
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    name: str = Field(nullable=False)
    surname: str = Field(nullable=False)
    patronymic: Optional[str] = Field(default=None, nullable=True)
    email: str = Field(nullable=False)
    password_hash: str = Field(nullable=False)

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
