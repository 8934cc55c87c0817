"""
Session Store Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class SessionState(str, Enum):
    """Logical state of a stored session"""

    active = "active"
    expired = "expired"
