"""
Session Store Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import SessionState
from .user import User
from .session import UserSession

__all__ = [
    # Enums
    "SessionState",
    # Entities
    "User",
    "UserSession",
]
